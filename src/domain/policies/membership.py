"""Membership rules shared by the ledger writers."""

from collections.abc import Iterable


def find_duplicate_ids(member_ids: Iterable[int]) -> list[int]:
    """Return ids listed more than once, in first-repeat order."""
    seen: set[int] = set()
    duplicates: list[int] = []
    for member_id in member_ids:
        if member_id in seen and member_id not in duplicates:
            duplicates.append(member_id)
        seen.add(member_id)
    return duplicates


def find_non_members(
    candidate_ids: Iterable[int],
    member_ids: Iterable[int],
) -> list[int]:
    """Return candidate ids that are not in the member set, sorted."""
    members = set(member_ids)
    return sorted({
        candidate for candidate in candidate_ids if candidate not in members
    })


__all__ = ["find_duplicate_ids", "find_non_members"]
