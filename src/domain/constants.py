"""Domain constants for the group ledger."""

DEFAULT_CURRENCY_CODE = "EUR"

EXPENSE_DATE_FORMAT = "YYYY-MM-DD"
EXPENSE_DATE_PATTERN = "%Y-%m-%d"


__all__ = [
    "DEFAULT_CURRENCY_CODE",
    "EXPENSE_DATE_FORMAT",
    "EXPENSE_DATE_PATTERN",
]
