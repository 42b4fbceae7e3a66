"""Helpers for Decimal money values."""

from collections.abc import Iterable
from decimal import Decimal


ZERO = Decimal("0")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through ``str`` so that 0.1 becomes Decimal("0.1") rather than
    its binary expansion.

    Args:
        value: Raw numeric value from SQL, forms or adapters.

    Returns:
        Decimal: Normalized numeric value; None maps to zero.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def sum_amounts(values: Iterable[Decimal]) -> Decimal:
    """Add Decimal amounts, returning Decimal zero for an empty input."""
    return sum(values, start=ZERO)


__all__ = ["ZERO", "coerce_decimal", "sum_amounts"]
