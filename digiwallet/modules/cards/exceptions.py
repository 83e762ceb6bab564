"""Card domain specific exceptions."""

from digiwallet.modules.common.exceptions import AlreadyExistsError, NotFoundError


class CardNotFoundError(NotFoundError):
    def __init__(self, card_id: int) -> None:
        super().__init__(f"Card not found with id: {card_id}")
        self.card_id = card_id


class CardAlreadyExistsError(AlreadyExistsError):
    """Raised when a card number is already issued."""

    def __init__(self, card_number: str) -> None:
        # only the last four digits go into messages and logs
        super().__init__(f"Card already exists with number ending: {card_number[-4:]}")
        self.card_number = card_number
