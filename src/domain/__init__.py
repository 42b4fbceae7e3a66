"""Domain package for ledger rules and core models."""

from .constants import DEFAULT_CURRENCY_CODE, EXPENSE_DATE_FORMAT
from .errors import (
    ExpenseConflictError,
    ExpenseNotFoundError,
    LedgerError,
    LedgerTransactionError,
    LedgerValidationError,
    NotGroupMemberError,
)
from .models import (
    Expense,
    ExpenseHistoryItem,
    HistoryItem,
    Member,
    MemberBalance,
    RecordedSettlement,
    Settlement,
    SettlementHistoryItem,
    Split,
)
from .policies import find_duplicate_ids, find_non_members
from .services import (
    compute_equal_shares,
    compute_group_balances,
    merge_history,
    validate_balance_conservation,
)

__all__ = [
    "DEFAULT_CURRENCY_CODE",
    "EXPENSE_DATE_FORMAT",
    "Expense",
    "ExpenseConflictError",
    "ExpenseHistoryItem",
    "ExpenseNotFoundError",
    "HistoryItem",
    "LedgerError",
    "LedgerTransactionError",
    "LedgerValidationError",
    "Member",
    "MemberBalance",
    "NotGroupMemberError",
    "RecordedSettlement",
    "Settlement",
    "SettlementHistoryItem",
    "Split",
    "compute_equal_shares",
    "compute_group_balances",
    "find_duplicate_ids",
    "find_non_members",
    "merge_history",
    "validate_balance_conservation",
]
