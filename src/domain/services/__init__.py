"""Domain services package."""

from .balances import compute_group_balances
from .history import as_utc_datetime, merge_history
from .normalization import normalize_description, normalize_display_name
from .splitting import DEFAULT_SPLIT_QUANTUM, compute_equal_shares
from .validation import validate_balance_conservation

__all__ = [
    "DEFAULT_SPLIT_QUANTUM",
    "as_utc_datetime",
    "compute_equal_shares",
    "compute_group_balances",
    "merge_history",
    "normalize_description",
    "normalize_display_name",
    "validate_balance_conservation",
]
