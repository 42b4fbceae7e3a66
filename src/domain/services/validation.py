"""Domain validation helpers."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.models.ledger import MemberBalance
from src.utils.decimal_utils import sum_amounts


CONSERVATION_TOLERANCE = Decimal("1e-9")


def validate_balance_conservation(
    balances: Iterable[MemberBalance],
    logger: Logger,
    tolerance: Decimal = CONSERVATION_TOLERANCE,
) -> Decimal:
    """Warn when group balances do not sum to zero.

    Args:
        balances: Computed member balances.
        logger: Logger used for warnings.
        tolerance: Largest absolute sum treated as zero.

    Returns:
        Decimal: The sum of the balances.
    """
    total = sum_amounts(item.balance for item in balances)
    if abs(total) > tolerance:
        logger.warning(f"Group balances do not sum to zero: {total}")
    return total


__all__ = ["CONSERVATION_TOLERANCE", "validate_balance_conservation"]
