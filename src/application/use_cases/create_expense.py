"""Use case for recording a new expense with its equal splits."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.membership_repository import (
    MembershipRepositoryPort,
)
from src.application.use_cases.expense_input import (
    build_expense_draft,
    ensure_expense_members,
)
from src.application.use_cases.membership_guard import ensure_group_member
from src.domain.errors import LedgerTransactionError
from src.domain.models.ledger import Expense
from src.domain.services.splitting import (
    DEFAULT_SPLIT_QUANTUM,
    compute_equal_shares,
)
from src.infrastructure.logging.logger import get_app_logger


class CreateExpenseUseCase:
    """Create an expense and one split per participant atomically."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        membership_repository: MembershipRepositoryPort,
        split_quantum: Decimal | None = DEFAULT_SPLIT_QUANTUM,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port for ledger reads and transactions.
            membership_repository: Port answering membership questions.
            split_quantum: Rounding unit for shares, or None to keep plain
                division.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._membership_repository = membership_repository
        self._split_quantum = split_quantum
        self._logger = logger or get_app_logger()

    def execute(
        self,
        group_id: int,
        actor_id: int,
        payer_id: int,
        amount,
        description: str,
        expense_date: str | date,
        participant_ids: Sequence[int],
    ) -> Expense:
        """Record the expense.

        Args:
            group_id: Group the expense belongs to.
            actor_id: Member performing the request.
            payer_id: Member who fronted the money.
            amount: Positive total amount.
            description: Free-text label.
            expense_date: Date as YYYY-MM-DD or a date instance.
            participant_ids: Members sharing the expense.

        Returns:
            Expense: The stored expense.

        Raises:
            NotGroupMemberError: If the actor is not in the group.
            LedgerValidationError: If any input is malformed.
            LedgerTransactionError: If a write failed; nothing was kept.
        """
        ensure_group_member(
            self._membership_repository,
            group_id,
            actor_id,
            self._logger,
        )
        draft, participants = build_expense_draft(
            group_id=group_id,
            payer_id=payer_id,
            amount=amount,
            description=description,
            expense_date=expense_date,
            participant_ids=participant_ids,
        )
        ensure_expense_members(
            self._membership_repository,
            group_id,
            draft.payer_id,
            participants,
        )
        shares = compute_equal_shares(
            draft.amount,
            participants,
            self._split_quantum,
        )

        try:
            with self._ledger_repository.unit_of_work() as uow:
                expense = uow.insert_expense(draft)
                uow.insert_splits(expense.expense_id, shares)
        except LedgerTransactionError:
            self._logger.error(
                f"Failed to create expense in group {group_id}; rolled back"
            )
            raise

        self._logger.info(
            f"Created expense {expense.expense_id} in group {group_id} "
            f"({expense.amount} split across {len(shares)} members)"
        )
        return expense


__all__ = ["CreateExpenseUseCase"]
