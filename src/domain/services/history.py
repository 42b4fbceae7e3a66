"""Merge expenses and settlements into one reverse-chronological feed."""

from collections.abc import Iterable, Mapping
from datetime import date, datetime, time, timezone

from src.domain.models.history import (
    ExpenseHistoryItem,
    HistoryItem,
    SettlementHistoryItem,
)
from src.domain.models.ledger import Expense, Settlement, Split


UNKNOWN_MEMBER_NAME = "unknown"

_KIND_RANK = {"expense": 0, "settlement": 1}


def as_utc_datetime(value: date | datetime) -> datetime:
    """Return an aware UTC datetime for a date or datetime.

    Dates map to midnight UTC; naive datetimes are assumed to be UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def merge_history(
    expenses: Iterable[Expense],
    settlements: Iterable[Settlement],
    splits: Iterable[Split],
    member_names: Mapping[int, str],
) -> list[HistoryItem]:
    """Project expenses and settlements into history items, newest first.

    Items sharing a timestamp are ordered settlements before expenses, then
    by descending id.

    Args:
        expenses: Expenses of the group.
        settlements: Settlements of the group.
        splits: Splits used to list each expense's participants.
        member_names: Display names keyed by member id.

    Returns:
        list[HistoryItem]: Merged feed sorted by effective date descending.
    """
    debtors: dict[int, list[int]] = {}
    for split in splits:
        debtors.setdefault(split.expense_id, []).append(split.debtor_id)

    def _name(member_id: int) -> str:
        return member_names.get(member_id, UNKNOWN_MEMBER_NAME)

    items: list[HistoryItem] = []
    for expense in expenses:
        participant_ids = debtors.get(expense.expense_id, [])
        items.append(
            ExpenseHistoryItem(
                item_id=expense.expense_id,
                occurred_at=as_utc_datetime(expense.expense_date),
                amount=expense.amount,
                payer_id=expense.payer_id,
                payer_name=_name(expense.payer_id),
                description=expense.description,
                participant_ids=tuple(participant_ids),
                participant_names=tuple(
                    _name(debtor_id) for debtor_id in participant_ids
                ),
            )
        )
    for settlement in settlements:
        items.append(
            SettlementHistoryItem(
                item_id=settlement.settlement_id,
                occurred_at=as_utc_datetime(settlement.created_at),
                amount=settlement.amount,
                payer_id=settlement.payer_id,
                payer_name=_name(settlement.payer_id),
                receiver_id=settlement.receiver_id,
                receiver_name=_name(settlement.receiver_id),
            )
        )

    return sorted(
        items,
        key=lambda item: (
            item.occurred_at,
            _KIND_RANK[item.kind],
            item.item_id,
        ),
        reverse=True,
    )


__all__ = ["UNKNOWN_MEMBER_NAME", "as_utc_datetime", "merge_history"]
