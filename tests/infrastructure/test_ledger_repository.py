"""Tests for the SQLAlchemy ledger repository on SQLite."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy import func, select

from src.application.ports.ledger_repository import (
    ExpenseDraft,
    SettlementDraft,
)
from src.domain.errors import ExpenseConflictError, LedgerTransactionError
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.schema import expenses, splits


def _draft(amount: str = "90", group_id: int = 10) -> ExpenseDraft:
    return ExpenseDraft(
        group_id=group_id,
        payer_id=1,
        amount=Decimal(amount),
        description="Dinner",
        expense_date=date(2024, 1, 1),
    )


def _count(engine, table) -> int:
    with engine.connect() as conn:
        return conn.execute(select(func.count()).select_from(table)).scalar()


def _insert_expense(repository, shares) -> int:
    with repository.unit_of_work() as uow:
        expense = uow.insert_expense(_draft())
        uow.insert_splits(expense.expense_id, shares)
    return expense.expense_id


def test_unit_of_work_commits_expense_and_splits(db_port):
    """Committed writes should be visible through the read methods."""
    repository = SqlAlchemyLedgerRepository(db_port)

    expense_id = _insert_expense(
        repository,
        [(1, Decimal("30")), (2, Decimal("30")), (3, Decimal("30"))],
    )

    stored = repository.fetch_expense(10, expense_id)
    assert stored.amount == Decimal("90")
    assert stored.expense_date == date(2024, 1, 1)
    assert stored.version == 1
    debtors = [split.debtor_id for split in repository.fetch_splits(10)]
    assert debtors == [1, 2, 3]
    stored_ids = [item.expense_id for item in repository.fetch_expenses(10)]
    assert stored_ids == [expense_id]


def test_fetch_expense_is_scoped_to_group(db_port):
    """Looking up an expense through another group should return None."""
    repository = SqlAlchemyLedgerRepository(db_port)
    expense_id = _insert_expense(repository, [(1, Decimal("90"))])

    assert repository.fetch_expense(20, expense_id) is None
    assert repository.fetch_splits(20) == []


def test_unit_of_work_rolls_back_on_failure(db_port, sqlite_engine):
    """A duplicate split should undo the expense insert as well."""
    repository = SqlAlchemyLedgerRepository(db_port)

    with pytest.raises(LedgerTransactionError):
        _insert_expense(repository, [(1, Decimal("45")), (1, Decimal("45"))])

    assert _count(sqlite_engine, expenses) == 0
    assert _count(sqlite_engine, splits) == 0


def test_update_expense_bumps_version(db_port):
    """Updates should apply only for the expected version."""
    repository = SqlAlchemyLedgerRepository(db_port)
    expense_id = _insert_expense(repository, [(1, Decimal("90"))])

    with repository.unit_of_work() as uow:
        updated = uow.update_expense(expense_id, _draft("120"), 1)

    assert updated.version == 2
    stored = repository.fetch_expense(10, expense_id)
    assert stored.amount == Decimal("120")
    assert stored.version == 2


def test_update_expense_with_stale_version_conflicts(db_port):
    """A stale version should raise and leave the row untouched."""
    repository = SqlAlchemyLedgerRepository(db_port)
    expense_id = _insert_expense(repository, [(1, Decimal("90"))])

    with pytest.raises(ExpenseConflictError):
        with repository.unit_of_work() as uow:
            uow.delete_splits(expense_id)
            uow.update_expense(expense_id, _draft("120"), 7)

    assert repository.fetch_expense(10, expense_id).amount == Decimal("90")
    assert len(repository.fetch_splits(10)) == 1


def test_delete_splits_and_expense(db_port, sqlite_engine):
    """Deleting splits then the expense should empty both tables."""
    repository = SqlAlchemyLedgerRepository(db_port)
    expense_id = _insert_expense(
        repository,
        [(1, Decimal("45")), (2, Decimal("45"))],
    )

    with repository.unit_of_work() as uow:
        removed = uow.delete_splits(expense_id)
        uow.delete_expense(expense_id, 1)

    assert removed == 2
    assert _count(sqlite_engine, expenses) == 0
    assert _count(sqlite_engine, splits) == 0


def test_insert_settlement_round_trips_timestamp(db_port):
    """Stored settlements should come back with an aware UTC timestamp."""
    repository = SqlAlchemyLedgerRepository(db_port)
    created_at = datetime(2024, 1, 2, 9, 30, tzinfo=timezone.utc)

    settlement = repository.insert_settlement(
        SettlementDraft(
            group_id=10,
            payer_id=2,
            receiver_id=1,
            amount=Decimal("100"),
            created_at=created_at,
        )
    )

    (stored,) = repository.fetch_settlements(10)
    assert stored.settlement_id == settlement.settlement_id
    assert stored.amount == Decimal("100")
    assert stored.created_at == created_at
    assert repository.fetch_settlements(20) == []


def test_insert_settlement_wraps_store_errors(db_port):
    """Constraint violations should surface as LedgerTransactionError."""
    repository = SqlAlchemyLedgerRepository(db_port)

    with pytest.raises(LedgerTransactionError):
        repository.insert_settlement(
            SettlementDraft(
                group_id=10,
                payer_id=1,
                receiver_id=1,
                amount=Decimal("5"),
                created_at=datetime(2024, 1, 2, tzinfo=timezone.utc),
            )
        )
