"""Per-wallet mutual exclusion for balance updates."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field


@dataclass(slots=True)
class _LockEntry:
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    holders: int = 0


class WalletLockRegistry:
    """Hands out one ``asyncio.Lock`` per wallet id.

    Entries are dropped once nobody holds or waits for them, so the registry
    only grows with the number of wallets being transacted on concurrently.
    One registry is shared by every request in the process.
    """

    def __init__(self) -> None:
        self._entries: dict[int, _LockEntry] = {}

    @asynccontextmanager
    async def hold(self, wallet_id: int) -> AsyncIterator[None]:
        entry = self._entries.get(wallet_id)
        if entry is None:
            entry = self._entries[wallet_id] = _LockEntry()
        entry.holders += 1
        try:
            async with entry.lock:
                yield
        finally:
            entry.holders -= 1
            if entry.holders == 0:
                self._entries.pop(wallet_id, None)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["WalletLockRegistry"]
