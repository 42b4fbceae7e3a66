"""Port for reading group memberships."""

from typing import Protocol

from src.domain.models.ledger import Member


class MembershipRepositoryPort(Protocol):
    """Port exposing read access to group memberships."""

    def is_member(self, group_id: int, member_id: int) -> bool:
        """Return True when the member belongs to the group."""

    def fetch_members(self, group_id: int) -> list[Member]:
        """Return every member of the group, ordered by member id."""


__all__ = ["MembershipRepositoryPort"]
