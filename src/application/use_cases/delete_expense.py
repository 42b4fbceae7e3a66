"""Use case for deleting an expense together with its splits."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.membership_repository import (
    MembershipRepositoryPort,
)
from src.application.use_cases.membership_guard import ensure_group_member
from src.domain.errors import ExpenseNotFoundError, LedgerTransactionError
from src.domain.models.ledger import Expense
from src.infrastructure.logging.logger import get_app_logger


class DeleteExpenseUseCase:
    """Delete an expense and its splits, all or nothing."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        membership_repository: MembershipRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._membership_repository = membership_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        group_id: int,
        actor_id: int,
        expense_id: int,
    ) -> Expense:
        """Delete the expense.

        Returns:
            Expense: The expense as it was before deletion.

        Raises:
            NotGroupMemberError: If the actor is not in the group.
            ExpenseNotFoundError: If the expense is not in the group.
            LedgerTransactionError: If a write failed; nothing was deleted.
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

        try:
            with self._ledger_repository.unit_of_work() as uow:
                if uow.fetch_expense(group_id, expense_id) is None:
                    raise ExpenseNotFoundError(
                        group_id=group_id,
                        expense_id=expense_id,
                    )
                removed = uow.delete_splits(expense_id)
                uow.delete_expense(
                    expense_id,
                    expected_version=current.version,
                )
        except LedgerTransactionError:
            self._logger.error(
                f"Failed to delete expense {expense_id} in group {group_id}; "
                "rolled back"
            )
            raise

        self._logger.info(
            f"Deleted expense {expense_id} and {removed} splits "
            f"from group {group_id}"
        )
        return current


__all__ = ["DeleteExpenseUseCase"]
