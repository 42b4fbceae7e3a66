"""Use case to list a group's expenses and settlements, newest first."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.membership_repository import (
    MembershipRepositoryPort,
)
from src.application.use_cases.membership_guard import ensure_group_member
from src.domain.models.history import HistoryItem
from src.domain.services.history import merge_history
from src.infrastructure.logging.logger import get_app_logger


class GetGroupHistoryUseCase:
    """Merge expenses and settlements into one history feed."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        membership_repository: MembershipRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._membership_repository = membership_repository
        self._logger = logger or get_app_logger()

    def execute(self, group_id: int, actor_id: int) -> list[HistoryItem]:
        """Return the group's history sorted by date descending."""
        ensure_group_member(
            self._membership_repository,
            group_id,
            actor_id,
            self._logger,
        )
        names = {
            member.member_id: member.display_name
            for member in self._membership_repository.fetch_members(group_id)
        }
        history = merge_history(
            self._ledger_repository.fetch_expenses(group_id),
            self._ledger_repository.fetch_settlements(group_id),
            self._ledger_repository.fetch_splits(group_id),
            names,
        )
        self._logger.info(
            f"Fetched {len(history)} history items for group {group_id}"
        )
        return history


__all__ = ["GetGroupHistoryUseCase", "HistoryItem"]
