"""Fixed-point money helpers."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

CENT = Decimal("0.01")
# NUMERIC(19, 2) on PostgreSQL leaves 17 integral digits; SQLite stores the exact string
MAX_AMOUNT = Decimal("99999999999999999.99")


def to_money(value: Decimal | int | str) -> Decimal | None:
    """Return ``value`` as a two-place Decimal, or None when it is not a
    finite amount expressible in whole cents within the storage range."""
    if isinstance(value, bool):
        return None
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite() or abs(amount) > MAX_AMOUNT:
        return None
    try:
        quantized = amount.quantize(CENT)
    except InvalidOperation:
        return None
    if quantized != amount:
        return None
    return quantized


__all__ = ["CENT", "MAX_AMOUNT", "to_money"]
