"""Column types shared by the models and the migrations."""

from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.types import TypeDecorator

from digiwallet.modules.common.money import CENT

# "-99999999999999999.99" plus headroom
_SQLITE_MONEY_LENGTH = 24


class Money(TypeDecorator):
    """Fixed-point amount with two decimal places.

    PostgreSQL keeps it in ``NUMERIC(19, 2)``. SQLite has no exact decimal
    storage (NUMERIC affinity becomes REAL), so the value is written as its
    decimal string there and parsed back into a ``Decimal`` on read.
    """

    impl = Numeric(19, 2, asdecimal=True)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(_SQLITE_MONEY_LENGTH))
        return dialect.type_descriptor(Numeric(19, 2, asdecimal=True))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        amount = Decimal(value).quantize(CENT)
        if dialect.name == "sqlite":
            return str(amount)
        return amount

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(str(value)).quantize(CENT)


__all__ = ["Money"]
