"""Validation of expense and settlement input shared by the writers."""

import re
from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from src.application.ports.ledger_repository import ExpenseDraft
from src.application.ports.membership_repository import (
    MembershipRepositoryPort,
)
from src.domain.constants import EXPENSE_DATE_FORMAT, EXPENSE_DATE_PATTERN
from src.domain.errors import LedgerValidationError
from src.domain.policies.membership import (
    find_duplicate_ids,
    find_non_members,
)
from src.domain.services.normalization import normalize_description
from src.utils.decimal_utils import coerce_decimal


_DATE_SHAPE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_amount(value, field: str = "amount") -> Decimal:
    """Convert a raw amount into a positive Decimal.

    Args:
        value: Raw amount (Decimal, int, float or numeric string).
        field: Input name reported on failure.

    Returns:
        Decimal: Validated amount.

    Raises:
        LedgerValidationError: If the amount is not a positive number.
    """
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise LedgerValidationError(
            f"Amount must be a number, got {value!r}", field=field
        ) from exc
    if not amount.is_finite() or amount <= 0:
        raise LedgerValidationError(
            "Amount must be greater than zero", field=field
        )
    return amount


def parse_expense_date(value: str | date) -> date:
    """Parse an expense date given as YYYY-MM-DD.

    Raises:
        LedgerValidationError: If the value is not a calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raw = str(value).strip()
    message = f"Invalid date format. Use {EXPENSE_DATE_FORMAT}"
    if not _DATE_SHAPE.match(raw):
        raise LedgerValidationError(message, field="date")
    try:
        return datetime.strptime(raw, EXPENSE_DATE_PATTERN).date()
    except ValueError as exc:
        raise LedgerValidationError(message, field="date") from exc


def build_expense_draft(
    group_id: int,
    payer_id: int,
    amount,
    description: str,
    expense_date: str | date,
    participant_ids: Sequence[int],
) -> tuple[ExpenseDraft, list[int]]:
    """Validate raw expense input.

    Returns:
        tuple[ExpenseDraft, list[int]]: Draft plus ordered participant ids.

    Raises:
        LedgerValidationError: On any malformed field.
    """
    participants = list(participant_ids or [])
    if not participants:
        raise LedgerValidationError(
            "An expense needs at least one participant",
            field="participant_ids",
        )
    duplicates = find_duplicate_ids(participants)
    if duplicates:
        raise LedgerValidationError(
            f"Participants listed more than once: {duplicates}",
            field="participant_ids",
        )
    cleaned_description = normalize_description(description)
    if not cleaned_description:
        raise LedgerValidationError(
            "Description is required", field="description"
        )
    draft = ExpenseDraft(
        group_id=group_id,
        payer_id=payer_id,
        amount=parse_amount(amount),
        description=cleaned_description,
        expense_date=parse_expense_date(expense_date),
    )
    return draft, participants


def ensure_expense_members(
    membership_repository: MembershipRepositoryPort,
    group_id: int,
    payer_id: int,
    participant_ids: Sequence[int],
) -> None:
    """Check that the payer and every participant belong to the group.

    Raises:
        LedgerValidationError: Naming the payer or the foreign participants.
    """
    member_ids = [
        member.member_id
        for member in membership_repository.fetch_members(group_id)
    ]
    if find_non_members([payer_id], member_ids):
        raise LedgerValidationError(
            f"Payer {payer_id} is not a member of group {group_id}",
            field="payer_id",
        )
    outsiders = find_non_members(participant_ids, member_ids)
    if outsiders:
        raise LedgerValidationError(
            f"Participants {outsiders} are not members of group {group_id}",
            field="participant_ids",
        )


__all__ = [
    "parse_amount",
    "parse_expense_date",
    "build_expense_draft",
    "ensure_expense_members",
]
