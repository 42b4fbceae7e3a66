"""Domain exceptions raised by the ledger engine."""


class LedgerError(Exception):
    """Base class for all ledger failures."""


class LedgerValidationError(LedgerError, ValueError):
    """Malformed input; nothing was written.

    Attributes:
        field: Name of the offending input, when known.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotGroupMemberError(LedgerError, PermissionError):
    """The acting member does not belong to the target group."""

    def __init__(self, group_id: int, member_id: int) -> None:
        super().__init__(
            f"Member {member_id} is not a member of group {group_id}"
        )
        self.group_id = group_id
        self.member_id = member_id


class ExpenseNotFoundError(LedgerError, LookupError):
    """No expense with the given id exists in the given group."""

    def __init__(self, group_id: int, expense_id: int) -> None:
        super().__init__(
            f"Expense {expense_id} not found in group {group_id}"
        )
        self.group_id = group_id
        self.expense_id = expense_id


class LedgerTransactionError(LedgerError, RuntimeError):
    """A write failed inside a store transaction and was rolled back."""


class ExpenseConflictError(LedgerTransactionError):
    """The expense changed since it was read (version mismatch)."""

    def __init__(self, expense_id: int, expected_version: int) -> None:
        super().__init__(
            f"Expense {expense_id} was modified concurrently "
            f"(expected version {expected_version})"
        )
        self.expense_id = expense_id
        self.expected_version = expected_version


__all__ = [
    "LedgerError",
    "LedgerValidationError",
    "NotGroupMemberError",
    "ExpenseNotFoundError",
    "LedgerTransactionError",
    "ExpenseConflictError",
]
