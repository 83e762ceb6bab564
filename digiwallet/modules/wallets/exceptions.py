"""Wallet domain specific exceptions."""

from digiwallet.modules.common.exceptions import AlreadyExistsError, NotFoundError


class WalletNotFoundError(NotFoundError):
    """Raised when no wallet matches the given id."""

    def __init__(self, wallet_id: int) -> None:
        super().__init__(f"Wallet not found with id: {wallet_id}")
        self.wallet_id = wallet_id


class UserWalletNotFoundError(NotFoundError):
    """Raised when a user has no wallet yet."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"Wallet not found for user id: {user_id}")
        self.user_id = user_id


class WalletAlreadyExistsError(AlreadyExistsError):
    """Raised when a user already owns a wallet."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"Wallet already exists for user id: {user_id}")
        self.user_id = user_id
