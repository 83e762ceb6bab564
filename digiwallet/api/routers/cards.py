"""Card endpoints."""
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from digiwallet.interfaces.http.deps import get_card_service, get_db_session
from digiwallet.modules.cards import UNSET, CardCreateInput, CardService, CardUpdateInput
from digiwallet.schemas import CardCreate, CardResponse, CardUpdate

router = APIRouter()


@router.post("/create", response_model=CardResponse, status_code=status.HTTP_201_CREATED, summary="Issue a card")
@router.post("", response_model=CardResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_card(
    payload: CardCreate,
    service: CardService = Depends(get_card_service),
    db: AsyncSession = Depends(get_db_session),
):
    card = await service.create_card(
        CardCreateInput(
            wallet_id=payload.wallet_id,
            card_number=payload.card_number,
            card_type=payload.card_type,
            expiry_date=payload.expiry_date,
            status=payload.status,
        )
    )
    await db.commit()
    return CardResponse.model_validate(card)


@router.get("/wallet/{wallet_id}", response_model=List[CardResponse], summary="List cards linked to a wallet")
async def list_wallet_cards(wallet_id: int, service: CardService = Depends(get_card_service)):
    return [CardResponse.model_validate(card) for card in await service.list_wallet_cards(wallet_id)]


@router.get("/{card_id}", response_model=CardResponse, summary="Get a card")
async def get_card(card_id: int, service: CardService = Depends(get_card_service)):
    return CardResponse.model_validate(await service.get_card(card_id))


@router.put("/{card_id}", response_model=CardResponse, summary="Update card type, expiry or status")
async def update_card(
    card_id: int,
    payload: CardUpdate,
    service: CardService = Depends(get_card_service),
    db: AsyncSession = Depends(get_db_session),
):
    provided = payload.model_fields_set
    card = await service.update_card(
        card_id,
        CardUpdateInput(
            card_type=payload.card_type if "card_type" in provided else UNSET,
            expiry_date=payload.expiry_date if "expiry_date" in provided else UNSET,
            status=payload.status if "status" in provided else UNSET,
        ),
    )
    await db.commit()
    return CardResponse.model_validate(card)


@router.delete("/{card_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a card")
async def delete_card(
    card_id: int,
    service: CardService = Depends(get_card_service),
    db: AsyncSession = Depends(get_db_session),
):
    await service.delete_card(card_id)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
