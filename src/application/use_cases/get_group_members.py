"""Use case to list the members of a group."""

from src.application.ports.membership_repository import (
    MembershipRepositoryPort,
)
from src.application.use_cases.membership_guard import ensure_group_member
from src.domain.models.ledger import Member
from src.infrastructure.logging.logger import get_app_logger


class GetGroupMembersUseCase:
    """Return group members for an authorized actor."""

    def __init__(
        self,
        membership_repository: MembershipRepositoryPort,
        logger=None,
    ) -> None:
        self._membership_repository = membership_repository
        self._logger = logger or get_app_logger()

    def execute(self, group_id: int, actor_id: int) -> list[Member]:
        ensure_group_member(
            self._membership_repository,
            group_id,
            actor_id,
            self._logger,
        )
        return self._membership_repository.fetch_members(group_id)


__all__ = ["GetGroupMembersUseCase", "Member"]
