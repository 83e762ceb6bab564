"""User endpoints."""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from digiwallet.interfaces.http.deps import get_db_session, get_user_service
from digiwallet.modules.users import UserCreateInput, UserService
from digiwallet.schemas import UserCreate, UserResponse

router = APIRouter()


@router.get("", response_model=List[UserResponse], summary="List users")
async def list_users(service: UserService = Depends(get_user_service)):
    users = await service.list_users()
    return [UserResponse.model_validate(user) for user in users]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED, summary="Sign up a user")
async def create_user(
    payload: UserCreate,
    service: UserService = Depends(get_user_service),
    db: AsyncSession = Depends(get_db_session),
):
    user = await service.create_user(
        UserCreateInput(
            username=payload.username,
            full_name=payload.full_name,
            email=payload.email,
            role=payload.role,
            status=payload.status,
        )
    )
    await db.commit()
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse, summary="Get a user")
async def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    return UserResponse.model_validate(await service.get_user(user_id))


@router.put("/{user_id}", response_model=UserResponse, summary="Toggle user status between ACTIVE and INACTIVE")
async def toggle_user_status(
    user_id: int,
    service: UserService = Depends(get_user_service),
    db: AsyncSession = Depends(get_db_session),
):
    user = await service.toggle_status(user_id)
    await db.commit()
    return UserResponse.model_validate(user)
