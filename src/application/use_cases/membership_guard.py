"""Authorization check shared by every ledger use case."""

from src.application.ports.membership_repository import (
    MembershipRepositoryPort,
)
from src.domain.errors import NotGroupMemberError


def ensure_group_member(
    membership_repository: MembershipRepositoryPort,
    group_id: int,
    actor_id: int,
    logger,
) -> None:
    """Raise when the acting member does not belong to the group.

    Args:
        membership_repository: Port answering membership questions.
        group_id: Target group.
        actor_id: Member performing the operation.
        logger: Logger used for warnings.

    Raises:
        NotGroupMemberError: If the actor is not a member of the group.
    """
    if not membership_repository.is_member(group_id, actor_id):
        logger.warning(
            f"Rejected access to group {group_id} for member {actor_id}"
        )
        raise NotGroupMemberError(group_id=group_id, member_id=actor_id)


__all__ = ["ensure_group_member"]
