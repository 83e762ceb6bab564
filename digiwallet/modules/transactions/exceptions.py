"""Transaction domain specific exceptions.

Balance-engine rejections are returned as ``TransactionOutcome`` values; the
exceptions here cover read paths only.
"""

from digiwallet.modules.common.exceptions import NotFoundError


class TransactionNotFoundError(NotFoundError):
    def __init__(self, transaction_id: int) -> None:
        super().__init__(f"Transaction not found with id: {transaction_id}")
        self.transaction_id = transaction_id
