"""CLI adapter printing a group's balances and history."""

import os

from src.domain.errors import LedgerError
from src.domain.models.history import ExpenseHistoryItem
from src.infrastructure.container import (
    build_database_adapter,
    build_group_balances_use_case,
    build_group_history_use_case,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def _parse_id(value: str | None, name: str, logger) -> int | None:
    """Parse a positive integer id from an environment value.

    Args:
        value: Raw environment value.
        name: Variable name used in warnings.
        logger: Logger used for warnings.

    Returns:
        int | None: Parsed id or None when missing or invalid.
    """
    if not value:
        logger.warning(f"{name} is required to print a group report.")
        return None
    try:
        parsed = int(value)
    except ValueError:
        logger.warning(f"Invalid {name} '{value}'. Expected an integer.")
        return None
    if parsed <= 0:
        logger.warning(f"Invalid {name} '{value}'. Expected a positive id.")
        return None
    return parsed


def main() -> None:
    """Print balances and history for LEDGER_GROUP_ID as LEDGER_ACTOR_ID."""
    logger = get_app_logger()
    group_id = _parse_id(
        os.getenv("LEDGER_GROUP_ID"),
        "LEDGER_GROUP_ID",
        logger,
    )
    actor_id = _parse_id(
        os.getenv("LEDGER_ACTOR_ID"),
        "LEDGER_ACTOR_ID",
        logger,
    )
    if group_id is None or actor_id is None:
        return

    settings = LedgerSettings.from_env()
    db_adapter = build_database_adapter()
    try:
        balances = build_group_balances_use_case(db_adapter).execute(
            group_id=group_id,
            actor_id=actor_id,
        )
        history = build_group_history_use_case(db_adapter).execute(
            group_id=group_id,
            actor_id=actor_id,
        )
    except LedgerError as exc:
        logger.error(str(exc))
        return

    currency = settings.currency_code
    print(f"Balances for group {group_id} ({currency})")
    for item in balances:
        print(f"  {item.display_name}: {item.balance:+,.2f}")

    print(f"History for group {group_id}")
    for entry in history:
        stamp = entry.occurred_at.date().isoformat()
        if isinstance(entry, ExpenseHistoryItem):
            print(
                f"  {stamp} expense #{entry.item_id} {entry.amount:,.2f} "
                f"paid by {entry.payer_name}: {entry.description}"
            )
        else:
            print(
                f"  {stamp} settlement #{entry.item_id} {entry.amount:,.2f} "
                f"{entry.payer_name} -> {entry.receiver_name}"
            )


if __name__ == "__main__":  # pragma: no cover
    main()
