"""History feed entries for a group.

Entries form a tagged union: each variant carries a constant ``kind`` and only
the fields that make sense for it (a settlement has no description).
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Literal, Union


@dataclass(frozen=True)
class ExpenseHistoryItem:
    """History entry projected from an expense."""

    item_id: int
    occurred_at: datetime
    amount: Decimal
    payer_id: int
    payer_name: str
    description: str
    participant_ids: tuple[int, ...] = ()
    participant_names: tuple[str, ...] = ()
    kind: Literal["expense"] = field(default="expense", init=False)


@dataclass(frozen=True)
class SettlementHistoryItem:
    """History entry projected from a settlement."""

    item_id: int
    occurred_at: datetime
    amount: Decimal
    payer_id: int
    payer_name: str
    receiver_id: int
    receiver_name: str
    kind: Literal["settlement"] = field(default="settlement", init=False)


HistoryItem = Union[ExpenseHistoryItem, SettlementHistoryItem]


__all__ = ["ExpenseHistoryItem", "SettlementHistoryItem", "HistoryItem"]
