"""Ports for reading and writing expenses, splits and settlements."""

from contextlib import AbstractContextManager
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Protocol

from src.domain.models.ledger import Expense, Settlement, Split


@dataclass(frozen=True)
class ExpenseDraft:
    """Validated expense fields ready to be written."""

    group_id: int
    payer_id: int
    amount: Decimal
    description: str
    expense_date: date


@dataclass(frozen=True)
class SettlementDraft:
    """Validated settlement fields ready to be written."""

    group_id: int
    payer_id: int
    receiver_id: int
    amount: Decimal
    created_at: datetime


class LedgerUnitOfWorkPort(Protocol):
    """Writes grouped in one store transaction.

    Implementations commit when the surrounding context exits normally and
    roll back every write of the block otherwise.
    """

    def fetch_expense(self, group_id: int, expense_id: int) -> Expense | None:
        """Return the expense when it exists in the group."""

    def insert_expense(self, draft: ExpenseDraft) -> Expense:
        """Insert an expense row and return it with its new id."""

    def update_expense(
        self,
        expense_id: int,
        draft: ExpenseDraft,
        expected_version: int,
    ) -> Expense:
        """Overwrite an expense when its version still matches."""

    def insert_splits(
        self,
        expense_id: int,
        shares: list[tuple[int, Decimal]],
    ) -> list[Split]:
        """Insert one split row per (debtor id, amount due) pair."""

    def delete_splits(self, expense_id: int) -> int:
        """Delete every split of the expense and return the row count."""

    def delete_expense(self, expense_id: int, expected_version: int) -> None:
        """Delete the expense row when its version still matches."""


class LedgerRepositoryPort(Protocol):
    """Port exposing ledger reads, the settlement insert and transactions."""

    def fetch_expense(self, group_id: int, expense_id: int) -> Expense | None:
        """Return the expense when it exists in the group."""

    def fetch_expenses(self, group_id: int) -> list[Expense]:
        """Return all expenses of the group."""

    def fetch_splits(self, group_id: int) -> list[Split]:
        """Return all splits of the group's expenses."""

    def fetch_settlements(self, group_id: int) -> list[Settlement]:
        """Return all settlements of the group."""

    def insert_settlement(self, draft: SettlementDraft) -> Settlement:
        """Insert a settlement row and return it with its new id."""

    def unit_of_work(self) -> AbstractContextManager[LedgerUnitOfWorkPort]:
        """Open a transaction for multi-row expense writes."""


__all__ = [
    "ExpenseDraft",
    "SettlementDraft",
    "LedgerUnitOfWorkPort",
    "LedgerRepositoryPort",
]
