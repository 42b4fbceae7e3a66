"""Domain models for group expenses, splits and settlements."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Member:
    """Group member as seen by the ledger.

    Attributes:
        member_id: Opaque user identifier.
        display_name: Name used for presentation only.
    """

    member_id: int
    display_name: str


@dataclass(frozen=True)
class Expense:
    """Money fronted by one member on behalf of a group.

    Attributes:
        expense_id: Store identifier.
        group_id: Owning group.
        payer_id: Member who paid.
        amount: Positive total amount.
        description: Free-text label.
        expense_date: Calendar date of the expense.
        version: Optimistic-concurrency counter, bumped on every edit.
    """

    expense_id: int
    group_id: int
    payer_id: int
    amount: Decimal
    description: str
    expense_date: date
    version: int = 1

    @property
    def date_label(self) -> str:
        """Return the expense date formatted as YYYY-MM-DD."""
        return self.expense_date.isoformat()


@dataclass(frozen=True)
class Split:
    """One participant's owed share of an expense."""

    split_id: int
    expense_id: int
    debtor_id: int
    amount_due: Decimal


@dataclass(frozen=True)
class Settlement:
    """Direct payment from one member to another, recorded once."""

    settlement_id: int
    group_id: int
    payer_id: int
    receiver_id: int
    amount: Decimal
    created_at: datetime


@dataclass(frozen=True)
class RecordedSettlement:
    """Settlement enriched with both members' display names."""

    settlement: Settlement
    payer_name: str
    receiver_name: str


@dataclass(frozen=True)
class MemberBalance:
    """Net position of a member in a group.

    A positive balance means the group owes this member money; a negative
    balance means the member owes the group.
    """

    member_id: int
    display_name: str
    balance: Decimal


__all__ = [
    "Member",
    "Expense",
    "Split",
    "Settlement",
    "RecordedSettlement",
    "MemberBalance",
]
