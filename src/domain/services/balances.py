"""Net balance aggregation for a group."""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from logging import Logger

from src.domain.models.ledger import (
    Expense,
    Member,
    MemberBalance,
    Settlement,
    Split,
)
from src.domain.services.validation import validate_balance_conservation


def compute_group_balances(
    members: Sequence[Member],
    expenses: Iterable[Expense],
    splits: Iterable[Split],
    settlements: Iterable[Settlement],
    logger: Logger,
) -> list[MemberBalance]:
    """Reduce a group's ledger rows to one net balance per member.

    Payers of expenses are credited with the expense amount, split debtors are
    debited with their share, and each settlement debits its payer and credits
    its receiver. Every step adds and removes the same quantity, so balances
    over the member set sum to zero.

    Args:
        members: Members of the group; every one gets an entry.
        expenses: Expenses of the group.
        splits: Splits; only those of the given expenses are counted.
        settlements: Settlements of the group.
        logger: Logger used for data warnings.

    Returns:
        list[MemberBalance]: Balances ordered by member id.
    """
    balances: dict[int, Decimal] = {
        member.member_id: Decimal("0") for member in members
    }
    orphans: dict[int, Decimal] = {}

    def _apply(member_id: int, delta: Decimal) -> None:
        target = balances if member_id in balances else orphans
        target[member_id] = target.get(member_id, Decimal("0")) + delta

    expense_ids = set()
    for expense in expenses:
        expense_ids.add(expense.expense_id)
        _apply(expense.payer_id, expense.amount)

    for split in splits:
        if split.expense_id not in expense_ids:
            continue
        _apply(split.debtor_id, -split.amount_due)

    for settlement in settlements:
        _apply(settlement.payer_id, -settlement.amount)
        _apply(settlement.receiver_id, settlement.amount)

    if orphans:
        logger.warning(
            f"Ignoring balances of {len(orphans)} non-member ids: "
            f"{sorted(orphans)}"
        )

    names = {member.member_id: member.display_name for member in members}
    result = [
        MemberBalance(
            member_id=member_id,
            display_name=names[member_id],
            balance=balances[member_id],
        )
        for member_id in sorted(balances)
    ]
    validate_balance_conservation(result, logger)
    return result


__all__ = ["compute_group_balances"]
