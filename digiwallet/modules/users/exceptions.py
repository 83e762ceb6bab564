"""User domain specific exceptions."""

from digiwallet.modules.common.exceptions import AlreadyExistsError, NotFoundError


class UserAlreadyExistsError(AlreadyExistsError):
    """Raised when attempting to create a user with a duplicate username."""

    def __init__(self, username: str) -> None:
        super().__init__(f"User already exists with username: {username}")
        self.username = username


class UserNotFoundError(NotFoundError):
    """Raised when the requested user cannot be found."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User not found with id: {user_id}")
        self.user_id = user_id
