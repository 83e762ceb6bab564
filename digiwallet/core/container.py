"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass

from digiwallet.core.config import Settings
from digiwallet.infrastructure.database.session import Database
from digiwallet.modules.transactions.reference import ReferenceIdGenerator
from digiwallet.modules.wallets.locks import WalletLockRegistry


@dataclass(slots=True)
class ApplicationContainer:
    """Process-wide collaborators, built once and attached to ``app.state``."""

    settings: Settings
    database: Database
    wallet_locks: WalletLockRegistry
    reference_ids: ReferenceIdGenerator

    async def init_infrastructure(self) -> None:
        """Create tables when configured to (development and tests)."""
        if self.settings.database.create_tables:
            await self.database.create_all()

    async def shutdown(self) -> None:
        await self.database.dispose()


def build_container(settings: Settings) -> ApplicationContainer:
    return ApplicationContainer(
        settings=settings,
        database=Database.from_settings(settings.database, debug=settings.debug),
        wallet_locks=WalletLockRegistry(),
        reference_ids=ReferenceIdGenerator(
            credit_prefix=settings.wallet.credit_reference_prefix,
            debit_prefix=settings.wallet.debit_reference_prefix,
        ),
    )


__all__ = ["ApplicationContainer", "build_container"]
