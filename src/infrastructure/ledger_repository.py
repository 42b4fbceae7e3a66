"""SQLAlchemy-backed repository for expenses, splits and settlements."""

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    ExpenseDraft,
    LedgerRepositoryPort,
    LedgerUnitOfWorkPort,
    SettlementDraft,
)
from src.domain.errors import ExpenseConflictError, LedgerTransactionError
from src.domain.models.ledger import Expense, Settlement, Split
from src.domain.services.history import as_utc_datetime
from src.infrastructure.schema import expenses, settlements, splits
from src.utils.decimal_utils import coerce_decimal


def _expense_query(group_id: int, expense_id: int):
    return select(expenses).where(
        expenses.c.id == expense_id,
        expenses.c.group_id == group_id,
    )


def _to_expense(row) -> Expense:
    return Expense(
        expense_id=row.id,
        group_id=row.group_id,
        payer_id=row.payer_id,
        amount=coerce_decimal(row.amount),
        description=row.description,
        expense_date=row.expense_date,
        version=row.version,
    )


def _to_split(row) -> Split:
    return Split(
        split_id=row.id,
        expense_id=row.expense_id,
        debtor_id=row.debtor_id,
        amount_due=coerce_decimal(row.amount_due),
    )


def _to_settlement(row) -> Settlement:
    return Settlement(
        settlement_id=row.id,
        group_id=row.group_id,
        payer_id=row.payer_id,
        receiver_id=row.receiver_id,
        amount=coerce_decimal(row.amount),
        created_at=as_utc_datetime(row.created_at),
    )


class SqlAlchemyLedgerUnitOfWork(LedgerUnitOfWorkPort):
    """Expense and split writes bound to one open transaction."""

    def __init__(self, conn: Connection) -> None:
        """Initialize the unit of work.

        Args:
            conn: Connection with an active transaction.
        """
        self._conn = conn

    def fetch_expense(self, group_id: int, expense_id: int) -> Expense | None:
        row = self._conn.execute(_expense_query(group_id, expense_id)).first()
        return _to_expense(row) if row else None

    def insert_expense(self, draft: ExpenseDraft) -> Expense:
        result = self._conn.execute(
            insert(expenses).values(
                group_id=draft.group_id,
                payer_id=draft.payer_id,
                amount=draft.amount,
                description=draft.description,
                expense_date=draft.expense_date,
                version=1,
            )
        )
        return Expense(
            expense_id=result.inserted_primary_key[0],
            group_id=draft.group_id,
            payer_id=draft.payer_id,
            amount=draft.amount,
            description=draft.description,
            expense_date=draft.expense_date,
            version=1,
        )

    def update_expense(
        self,
        expense_id: int,
        draft: ExpenseDraft,
        expected_version: int,
    ) -> Expense:
        """Overwrite the expense if nobody changed it since it was read.

        Raises:
            ExpenseConflictError: If the stored version differs.
        """
        result = self._conn.execute(
            update(expenses)
            .where(
                expenses.c.id == expense_id,
                expenses.c.group_id == draft.group_id,
                expenses.c.version == expected_version,
            )
            .values(
                payer_id=draft.payer_id,
                amount=draft.amount,
                description=draft.description,
                expense_date=draft.expense_date,
                version=expenses.c.version + 1,
            )
        )
        if result.rowcount != 1:
            raise ExpenseConflictError(expense_id, expected_version)
        return Expense(
            expense_id=expense_id,
            group_id=draft.group_id,
            payer_id=draft.payer_id,
            amount=draft.amount,
            description=draft.description,
            expense_date=draft.expense_date,
            version=expected_version + 1,
        )

    def insert_splits(
        self,
        expense_id: int,
        shares: list[tuple[int, Decimal]],
    ) -> list[Split]:
        created = []
        for debtor_id, amount_due in shares:
            result = self._conn.execute(
                insert(splits).values(
                    expense_id=expense_id,
                    debtor_id=debtor_id,
                    amount_due=amount_due,
                )
            )
            created.append(
                Split(
                    split_id=result.inserted_primary_key[0],
                    expense_id=expense_id,
                    debtor_id=debtor_id,
                    amount_due=amount_due,
                )
            )
        return created

    def delete_splits(self, expense_id: int) -> int:
        result = self._conn.execute(
            delete(splits).where(splits.c.expense_id == expense_id)
        )
        return result.rowcount

    def delete_expense(self, expense_id: int, expected_version: int) -> None:
        """Delete the expense if nobody changed it since it was read.

        Raises:
            ExpenseConflictError: If the stored version differs.
        """
        result = self._conn.execute(
            delete(expenses).where(
                expenses.c.id == expense_id,
                expenses.c.version == expected_version,
            )
        )
        if result.rowcount != 1:
            raise ExpenseConflictError(expense_id, expected_version)


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for ledger rows."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_expense(self, group_id: int, expense_id: int) -> Expense | None:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(_expense_query(group_id, expense_id)).first()
        return _to_expense(row) if row else None

    def fetch_expenses(self, group_id: int) -> list[Expense]:
        query = (
            select(expenses)
            .where(expenses.c.group_id == group_id)
            .order_by(expenses.c.id)
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [_to_expense(row) for row in rows]

    def fetch_splits(self, group_id: int) -> list[Split]:
        query = (
            select(splits)
            .join(expenses, splits.c.expense_id == expenses.c.id)
            .where(expenses.c.group_id == group_id)
            .order_by(splits.c.id)
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [_to_split(row) for row in rows]

    def fetch_settlements(self, group_id: int) -> list[Settlement]:
        query = (
            select(settlements)
            .where(settlements.c.group_id == group_id)
            .order_by(settlements.c.id)
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [_to_settlement(row) for row in rows]

    def insert_settlement(self, draft: SettlementDraft) -> Settlement:
        """Insert one settlement row.

        Raises:
            LedgerTransactionError: If the insert failed.
        """
        created_at = as_utc_datetime(draft.created_at)
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                result = conn.execute(
                    insert(settlements).values(
                        group_id=draft.group_id,
                        payer_id=draft.payer_id,
                        receiver_id=draft.receiver_id,
                        amount=draft.amount,
                        created_at=created_at,
                    )
                )
                settlement_id = result.inserted_primary_key[0]
        except SQLAlchemyError as exc:
            raise LedgerTransactionError(
                f"Failed to insert settlement: {exc}"
            ) from exc
        return Settlement(
            settlement_id=settlement_id,
            group_id=draft.group_id,
            payer_id=draft.payer_id,
            receiver_id=draft.receiver_id,
            amount=draft.amount,
            created_at=created_at,
        )

    @contextmanager
    def unit_of_work(self) -> Iterator[SqlAlchemyLedgerUnitOfWork]:
        """Open a transaction committed on success, rolled back otherwise.

        Raises:
            LedgerTransactionError: If a statement failed in the store.
        """
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                yield SqlAlchemyLedgerUnitOfWork(conn)
        except SQLAlchemyError as exc:
            raise LedgerTransactionError(
                f"Ledger transaction rolled back: {exc}"
            ) from exc


__all__ = ["SqlAlchemyLedgerRepository", "SqlAlchemyLedgerUnitOfWork"]
