"""Use case for replacing an expense and rebuilding its splits."""

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
from src.domain.errors import ExpenseNotFoundError, LedgerTransactionError
from src.domain.models.ledger import Expense
from src.domain.services.splitting import (
    DEFAULT_SPLIT_QUANTUM,
    compute_equal_shares,
)
from src.infrastructure.logging.logger import get_app_logger


class EditExpenseUseCase:
    """Overwrite an expense and recreate its splits in one transaction.

    The expense version read before validation must still match when the
    update is written; otherwise the transaction is rolled back with
    ExpenseConflictError.
    """

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        membership_repository: MembershipRepositoryPort,
        split_quantum: Decimal | None = DEFAULT_SPLIT_QUANTUM,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._membership_repository = membership_repository
        self._split_quantum = split_quantum
        self._logger = logger or get_app_logger()

    def execute(
        self,
        group_id: int,
        actor_id: int,
        expense_id: int,
        payer_id: int,
        amount,
        description: str,
        expense_date: str | date,
        participant_ids: Sequence[int],
    ) -> Expense:
        """Replace the expense fields and participant set.

        Returns:
            Expense: The updated expense.

        Raises:
            NotGroupMemberError: If the actor is not in the group.
            ExpenseNotFoundError: If the expense is not in the group.
            LedgerValidationError: If any input is malformed.
            LedgerTransactionError: If a write failed; nothing was changed.
        """
        ensure_group_member(
            self._membership_repository,
            group_id,
            actor_id,
            self._logger,
        )
        current = self._ledger_repository.fetch_expense(group_id, expense_id)
        if current is None:
            raise ExpenseNotFoundError(
                group_id=group_id,
                expense_id=expense_id,
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
                if uow.fetch_expense(group_id, expense_id) is None:
                    raise ExpenseNotFoundError(
                        group_id=group_id,
                        expense_id=expense_id,
                    )
                removed = uow.delete_splits(expense_id)
                updated = uow.update_expense(
                    expense_id,
                    draft,
                    expected_version=current.version,
                )
                uow.insert_splits(expense_id, shares)
        except LedgerTransactionError:
            self._logger.error(
                f"Failed to edit expense {expense_id} in group {group_id}; "
                "rolled back"
            )
            raise

        self._logger.info(
            f"Edited expense {expense_id} in group {group_id}: "
            f"replaced {removed} splits with {len(shares)}"
        )
        return updated


__all__ = ["EditExpenseUseCase"]
