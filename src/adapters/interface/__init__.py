"""Interface adapters (user-facing entry points)."""

__all__ = []
