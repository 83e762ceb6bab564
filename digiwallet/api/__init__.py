from fastapi import APIRouter

from digiwallet.api.routers import cards, health, transactions, users, wallets


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(users.router, prefix="/users", tags=["users"])
    router.include_router(wallets.router, prefix="/wallets", tags=["wallets"])
    router.include_router(cards.router, prefix="/cards", tags=["cards"])
    router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
    router.include_router(health.router, prefix="/health", tags=["health"])
    return router


__all__ = [
    "create_api_router",
]
