"""In-memory ledger store and fixtures for use case tests."""

from __future__ import annotations

from contextlib import contextmanager
import copy
from dataclasses import replace
from decimal import Decimal
from itertools import count
from unittest.mock import MagicMock

import pytest

from src.application.ports.ledger_repository import (
    ExpenseDraft,
    LedgerRepositoryPort,
    LedgerUnitOfWorkPort,
    SettlementDraft,
)
from src.application.ports.membership_repository import (
    MembershipRepositoryPort,
)
from src.domain.errors import ExpenseConflictError, LedgerTransactionError
from src.domain.models.ledger import Expense, Member, Settlement, Split


GROUP_ID = 10
OTHER_GROUP_ID = 20


class FakeMembershipRepository(MembershipRepositoryPort):
    """Membership store keyed by group id."""

    def __init__(self, groups: dict[int, list[Member]]) -> None:
        self._groups = groups

    def is_member(self, group_id: int, member_id: int) -> bool:
        return any(
            member.member_id == member_id
            for member in self._groups.get(group_id, [])
        )

    def fetch_members(self, group_id: int) -> list[Member]:
        return sorted(
            self._groups.get(group_id, []),
            key=lambda member: member.member_id,
        )


class FakeUnitOfWork(LedgerUnitOfWorkPort):
    """Writes applied directly to the fake store's dictionaries."""

    def __init__(self, store: "FakeLedgerRepository") -> None:
        self._store = store

    def fetch_expense(self, group_id: int, expense_id: int) -> Expense | None:
        return self._store.fetch_expense(group_id, expense_id)

    def insert_expense(self, draft: ExpenseDraft) -> Expense:
        expense = Expense(
            expense_id=next(self._store.expense_ids),
            group_id=draft.group_id,
            payer_id=draft.payer_id,
            amount=draft.amount,
            description=draft.description,
            expense_date=draft.expense_date,
        )
        self._store.expenses[expense.expense_id] = expense
        return expense

    def update_expense(
        self,
        expense_id: int,
        draft: ExpenseDraft,
        expected_version: int,
    ) -> Expense:
        stored = self._store.expenses.get(expense_id)
        if stored is None or stored.version != expected_version:
            raise ExpenseConflictError(expense_id, expected_version)
        updated = replace(
            stored,
            payer_id=draft.payer_id,
            amount=draft.amount,
            description=draft.description,
            expense_date=draft.expense_date,
            version=stored.version + 1,
        )
        self._store.expenses[expense_id] = updated
        return updated

    def insert_splits(
        self,
        expense_id: int,
        shares: list[tuple[int, Decimal]],
    ) -> list[Split]:
        created = []
        for debtor_id, amount_due in shares:
            if self._store.fail_on_split_debtor == debtor_id:
                raise LedgerTransactionError("split insert failed")
            split = Split(
                split_id=next(self._store.split_ids),
                expense_id=expense_id,
                debtor_id=debtor_id,
                amount_due=amount_due,
            )
            self._store.splits[split.split_id] = split
            created.append(split)
        return created

    def delete_splits(self, expense_id: int) -> int:
        doomed = [
            split_id
            for split_id, split in self._store.splits.items()
            if split.expense_id == expense_id
        ]
        for split_id in doomed:
            del self._store.splits[split_id]
        return len(doomed)

    def delete_expense(self, expense_id: int, expected_version: int) -> None:
        stored = self._store.expenses.get(expense_id)
        if stored is None or stored.version != expected_version:
            raise ExpenseConflictError(expense_id, expected_version)
        del self._store.expenses[expense_id]


class FakeLedgerRepository(LedgerRepositoryPort):
    """Ledger store restoring a snapshot when a unit of work fails."""

    def __init__(self) -> None:
        self.expenses: dict[int, Expense] = {}
        self.splits: dict[int, Split] = {}
        self.settlements: dict[int, Settlement] = {}
        self.expense_ids = count(1)
        self.split_ids = count(1)
        self.settlement_ids = count(1)
        self.fail_on_split_debtor: int | None = None
        self.committed = 0
        self.rolled_back = 0

    def fetch_expense(self, group_id: int, expense_id: int) -> Expense | None:
        expense = self.expenses.get(expense_id)
        if expense is None or expense.group_id != group_id:
            return None
        return expense

    def fetch_expenses(self, group_id: int) -> list[Expense]:
        return [
            expense
            for expense in self.expenses.values()
            if expense.group_id == group_id
        ]

    def fetch_splits(self, group_id: int) -> list[Split]:
        expense_ids = {
            expense.expense_id for expense in self.fetch_expenses(group_id)
        }
        return [
            split
            for split in self.splits.values()
            if split.expense_id in expense_ids
        ]

    def fetch_settlements(self, group_id: int) -> list[Settlement]:
        return [
            settlement
            for settlement in self.settlements.values()
            if settlement.group_id == group_id
        ]

    def insert_settlement(self, draft: SettlementDraft) -> Settlement:
        settlement = Settlement(
            settlement_id=next(self.settlement_ids),
            group_id=draft.group_id,
            payer_id=draft.payer_id,
            receiver_id=draft.receiver_id,
            amount=draft.amount,
            created_at=draft.created_at,
        )
        self.settlements[settlement.settlement_id] = settlement
        return settlement

    @contextmanager
    def unit_of_work(self):
        snapshot = (copy.copy(self.expenses), copy.copy(self.splits))
        try:
            yield FakeUnitOfWork(self)
        except Exception:
            self.expenses, self.splits = snapshot
            self.rolled_back += 1
            raise
        self.committed += 1

    def splits_for(self, expense_id: int) -> dict[int, Decimal]:
        return {
            split.debtor_id: split.amount_due
            for split in self.splits.values()
            if split.expense_id == expense_id
        }


@pytest.fixture
def members() -> FakeMembershipRepository:
    """Group 10: Alice, Bob, Carol (1-3). Group 20: Alice and Dave (4)."""
    return FakeMembershipRepository(
        {
            GROUP_ID: [
                Member(1, "Alice"),
                Member(2, "Bob"),
                Member(3, "Carol"),
            ],
            OTHER_GROUP_ID: [
                Member(1, "Alice"),
                Member(4, "Dave"),
            ],
        }
    )


@pytest.fixture
def ledger() -> FakeLedgerRepository:
    return FakeLedgerRepository()


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()
