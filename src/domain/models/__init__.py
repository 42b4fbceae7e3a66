"""Domain models package."""

from .history import ExpenseHistoryItem, HistoryItem, SettlementHistoryItem
from .ledger import (
    Expense,
    Member,
    MemberBalance,
    RecordedSettlement,
    Settlement,
    Split,
)

__all__ = [
    "Expense",
    "ExpenseHistoryItem",
    "HistoryItem",
    "Member",
    "MemberBalance",
    "RecordedSettlement",
    "Settlement",
    "SettlementHistoryItem",
    "Split",
]
