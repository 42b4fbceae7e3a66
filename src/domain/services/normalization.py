"""Domain normalization helpers."""


def normalize_description(description: str | None) -> str:
    """Normalize an expense description.

    Args:
        description: Raw description from the caller.

    Returns:
        str: Description with surrounding whitespace removed.
    """
    if not description:
        return ""
    return description.strip()


def normalize_display_name(name: str | None, member_id: int) -> str:
    """Return a presentable member name, falling back to the id.

    Args:
        name: Raw display name from the membership store.
        member_id: Member id used when the name is blank.

    Returns:
        str: Normalized display name.
    """
    cleaned = name.strip() if name else ""
    return cleaned or f"member-{member_id}"


__all__ = ["normalize_description", "normalize_display_name"]
