"""Application use cases package."""

from .create_expense import CreateExpenseUseCase
from .delete_expense import DeleteExpenseUseCase
from .edit_expense import EditExpenseUseCase
from .get_group_balances import GetGroupBalancesUseCase, MemberBalance
from .get_group_history import GetGroupHistoryUseCase, HistoryItem
from .get_group_members import GetGroupMembersUseCase, Member
from .record_settlement import RecordSettlementUseCase

__all__ = [
    "CreateExpenseUseCase",
    "DeleteExpenseUseCase",
    "EditExpenseUseCase",
    "GetGroupBalancesUseCase",
    "GetGroupHistoryUseCase",
    "GetGroupMembersUseCase",
    "HistoryItem",
    "Member",
    "MemberBalance",
    "RecordSettlementUseCase",
]
