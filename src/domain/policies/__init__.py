"""Domain policies package."""

from .membership import find_duplicate_ids, find_non_members

__all__ = ["find_duplicate_ids", "find_non_members"]
