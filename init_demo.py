"""
Seed a demo user with a funded wallet.

Safe to run repeatedly: existing rows are left as they are.
"""
import asyncio
from decimal import Decimal

from digiwallet.core.config import get_settings
from digiwallet.core.container import build_container
from digiwallet.modules.users import UserCreateInput, UserService
from digiwallet.modules.wallets import WalletService

DEMO_USERNAME = "demo"


async def create_demo_wallet():
    settings = get_settings()
    container = build_container(settings)
    await container.init_infrastructure()

    try:
        async with container.database.session() as session:
            users = UserService.with_session(session)
            wallets = WalletService.with_session(session, default_currency=settings.default_currency)

            existing = await users.get_by_username(DEMO_USERNAME)
            if existing is None:
                existing = await users.create_user(
                    UserCreateInput(username=DEMO_USERNAME, full_name="Demo User", email="demo@example.com")
                )
                print(f"Created user {existing.username} (id={existing.id})")
            else:
                print(f"User {existing.username} already exists (id={existing.id})")

            wallet = await wallets.find_wallet_for_user(existing.id)
            if wallet is None:
                wallet = await wallets.create_wallet(user_id=existing.id, initial_balance=Decimal("1000.00"))
                print(f"Created wallet {wallet.id} with balance {wallet.balance} {wallet.currency}")
            else:
                print(f"Wallet {wallet.id} already exists, balance {wallet.balance} {wallet.currency}")
    finally:
        await container.shutdown()


if __name__ == "__main__":
    asyncio.run(create_demo_wallet())
