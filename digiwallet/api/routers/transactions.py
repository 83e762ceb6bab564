"""Transaction endpoints backed by the wallet balance engine."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from digiwallet.api.errors import rejection_to_http
from digiwallet.core.container import ApplicationContainer
from digiwallet.interfaces.http.deps import get_container, get_transaction_service
from digiwallet.modules.transactions import TransactionRequest, TransactionService
from digiwallet.schemas import ErrorResponse, TransactionCreate, TransactionResponse

router = APIRouter()


@router.post(
    "",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Credit or debit a wallet",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid amount or inactive wallet"},
        404: {"model": ErrorResponse, "description": "Wallet not found"},
        422: {"model": ErrorResponse, "description": "Insufficient funds"},
    },
)
async def create_transaction(
    payload: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service),
):
    outcome = await service.apply_transaction(
        TransactionRequest(
            wallet_id=payload.wallet_id,
            type=payload.type,
            amount=payload.amount,
            category=payload.category,
            reference_id=payload.reference_id,
        )
    )
    if not outcome.ok:
        raise rejection_to_http(outcome.error)
    return TransactionResponse.model_validate(outcome.transaction)


@router.get("/wallet/{wallet_id}", response_model=List[TransactionResponse], summary="List a wallet's transactions")
async def list_wallet_transactions(
    wallet_id: int,
    limit: Optional[int] = Query(None, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    service: TransactionService = Depends(get_transaction_service),
    container: ApplicationContainer = Depends(get_container),
):
    page_size = limit or container.settings.wallet.transaction_page_size
    rows = await service.list_wallet_transactions(wallet_id, page_size, offset)
    return [TransactionResponse.model_validate(row) for row in rows]


@router.get(
    "/{transaction_id}",
    response_model=TransactionResponse,
    summary="Get a transaction",
    responses={404: {"model": ErrorResponse}},
)
async def get_transaction(transaction_id: int, service: TransactionService = Depends(get_transaction_service)):
    return TransactionResponse.model_validate(await service.get_transaction(transaction_id))
