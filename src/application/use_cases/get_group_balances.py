"""Use case to compute the net balance of every group member."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.membership_repository import (
    MembershipRepositoryPort,
)
from src.application.use_cases.membership_guard import ensure_group_member
from src.domain.models.ledger import MemberBalance
from src.domain.services.balances import compute_group_balances
from src.infrastructure.logging.logger import get_app_logger


class GetGroupBalancesUseCase:
    """Recompute member balances from the group's ledger rows."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        membership_repository: MembershipRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing expenses, splits, settlements.
            membership_repository: Port providing the member list.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._membership_repository = membership_repository
        self._logger = logger or get_app_logger()

    def execute(self, group_id: int, actor_id: int) -> list[MemberBalance]:
        """Return one balance per group member, zero balances included.

        Args:
            group_id: Target group.
            actor_id: Member performing the request.

        Returns:
            list[MemberBalance]: Balances ordered by member id.
        """
        ensure_group_member(
            self._membership_repository,
            group_id,
            actor_id,
            self._logger,
        )
        members = self._membership_repository.fetch_members(group_id)
        expenses = self._ledger_repository.fetch_expenses(group_id)
        splits = self._ledger_repository.fetch_splits(group_id)
        settlements = self._ledger_repository.fetch_settlements(group_id)

        balances = compute_group_balances(
            members,
            expenses,
            splits,
            settlements,
            logger=self._logger,
        )
        self._logger.info(
            f"Computed {len(balances)} balances for group {group_id} from "
            f"{len(expenses)} expenses and {len(settlements)} settlements"
        )
        return balances


__all__ = ["GetGroupBalancesUseCase", "MemberBalance"]
