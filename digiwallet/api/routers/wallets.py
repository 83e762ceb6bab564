"""Wallet endpoints."""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from digiwallet.interfaces.http.deps import get_db_session, get_wallet_service
from digiwallet.modules.wallets import WalletService
from digiwallet.schemas import WalletCreate, WalletResponse, WalletStatusUpdate

router = APIRouter()


@router.post("", response_model=WalletResponse, status_code=status.HTTP_201_CREATED, summary="Create a user's wallet")
async def create_wallet(
    payload: WalletCreate,
    service: WalletService = Depends(get_wallet_service),
    db: AsyncSession = Depends(get_db_session),
):
    wallet = await service.create_wallet(
        user_id=payload.user_id,
        initial_balance=payload.balance,
        currency=payload.currency,
    )
    await db.commit()
    return WalletResponse.model_validate(wallet)


@router.get("", response_model=List[WalletResponse], summary="List wallets")
async def list_wallets(service: WalletService = Depends(get_wallet_service)):
    return [WalletResponse.model_validate(wallet) for wallet in await service.list_wallets()]


@router.get("/user/{user_id}", response_model=WalletResponse, summary="Get the wallet owned by a user")
async def get_wallet_for_user(user_id: int, service: WalletService = Depends(get_wallet_service)):
    return WalletResponse.model_validate(await service.get_wallet_for_user(user_id))


@router.get("/{wallet_id}", response_model=WalletResponse, summary="Get a wallet")
async def get_wallet(wallet_id: int, service: WalletService = Depends(get_wallet_service)):
    return WalletResponse.model_validate(await service.get_wallet(wallet_id))


@router.put("/{wallet_id}/status", response_model=WalletResponse, summary="Activate or freeze a wallet")
async def update_wallet_status(
    wallet_id: int,
    payload: WalletStatusUpdate,
    service: WalletService = Depends(get_wallet_service),
    db: AsyncSession = Depends(get_db_session),
):
    wallet = await service.update_status(wallet_id, payload.status)
    await db.commit()
    return WalletResponse.model_validate(wallet)
