"""Shared fixtures: a fresh file-backed SQLite database per test.

The application container is built the same way as in production and the
HTTP client talks to the ASGI app in-process. ``ASGITransport`` does not run
the lifespan, so tables are created here directly.
"""

from decimal import Decimal
from types import SimpleNamespace

import pytest
from httpx import ASGITransport, AsyncClient

from digiwallet.core.config import DatabaseSettings, Settings
from digiwallet.core.container import build_container
from digiwallet.main import create_app
from digiwallet.modules.cards import CardService
from digiwallet.modules.transactions import TransactionService
from digiwallet.modules.users import UserCreateInput, UserService
from digiwallet.modules.wallets import WalletService


@pytest.fixture
def settings(tmp_path):
    return Settings(
        environment="test",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'wallet.db'}"),
    )


@pytest.fixture
async def container(settings):
    container = build_container(settings)
    await container.init_infrastructure()
    yield container
    await container.shutdown()


@pytest.fixture
async def session(container):
    async with container.database.session() as session:
        yield session


@pytest.fixture
def services(session, container):
    return SimpleNamespace(
        users=UserService.with_session(session),
        wallets=WalletService.with_session(session, default_currency=container.settings.default_currency),
        cards=CardService.with_session(session),
        transactions=TransactionService.with_session(
            session,
            locks=container.wallet_locks,
            references=container.reference_ids,
        ),
    )


@pytest.fixture
def make_wallet(services, session):
    """Create (and commit) a user with a wallet holding ``balance``."""

    async def _make(username: str = "alice", balance: str = "0"):
        user = await services.users.create_user(UserCreateInput(username=username))
        wallet = await services.wallets.create_wallet(user_id=user.id, initial_balance=Decimal(balance))
        await session.commit()
        return wallet

    return _make


@pytest.fixture
def transaction_service(container):
    """Build a TransactionService bound to its own session, like one request."""

    def _build(session):
        return TransactionService.with_session(
            session,
            locks=container.wallet_locks,
            references=container.reference_ids,
        )

    return _build


@pytest.fixture
async def client(settings, container):
    app = create_app(settings=settings, container=container)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def api_wallet(client):
    """Create a user and wallet through the API, returning the wallet JSON."""

    async def _make(username: str = "alice", balance: str = "0"):
        user = await client.post("/api/users", json={"username": username})
        assert user.status_code == 201, user.text
        wallet = await client.post("/api/wallets", json={"userId": user.json()["id"], "balance": balance})
        assert wallet.status_code == 201, wallet.text
        return wallet.json()

    return _make
