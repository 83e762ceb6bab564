"""Reference id generation for engine-created transactions."""

from __future__ import annotations

import time
from collections.abc import Callable

from digiwallet.modules.common.types import TransactionType


class ReferenceIdGenerator:
    """Produces ``CR-<n>`` / ``DB-<n>`` ids.

    ``<n>`` is the current time in milliseconds, bumped so that it strictly
    increases across calls within the process. Ids are distinguishing, not
    guaranteed unique across processes.
    """

    def __init__(
        self,
        *,
        credit_prefix: str = "CR",
        debit_prefix: str = "DB",
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        self._prefixes = {
            TransactionType.CREDIT: credit_prefix,
            TransactionType.DEBIT: debit_prefix,
        }
        self._clock = clock
        self._last = 0

    def next_id(self, transaction_type: TransactionType) -> str:
        now_ms = self._clock() // 1_000_000
        self._last = max(now_ms, self._last + 1)
        return f"{self._prefixes[transaction_type]}-{self._last}"


__all__ = ["ReferenceIdGenerator"]
