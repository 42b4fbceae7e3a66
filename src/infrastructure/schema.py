"""SQLAlchemy Core schema of the ledger store."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.engine import Engine


metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("username", String(255), nullable=False, unique=True),
)

groups = Table(
    "groups",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("owner_id", Integer, ForeignKey("users.id"), nullable=False),
)

memberships = Table(
    "memberships",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("group_id", Integer, ForeignKey("groups.id"), nullable=False),
    UniqueConstraint("user_id", "group_id", name="uq_memberships_user_group"),
)

expenses = Table(
    "expenses",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("group_id", Integer, ForeignKey("groups.id"), nullable=False),
    Column("payer_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("amount", Numeric(asdecimal=True), nullable=False),
    Column("description", String(255), nullable=False),
    Column("expense_date", Date, nullable=False),
    Column("version", Integer, nullable=False, default=1),
    CheckConstraint("amount > 0", name="ck_expenses_amount_positive"),
)

splits = Table(
    "splits",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("expense_id", Integer, ForeignKey("expenses.id"), nullable=False),
    Column("debtor_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("amount_due", Numeric(asdecimal=True), nullable=False),
    UniqueConstraint(
        "expense_id",
        "debtor_id",
        name="uq_splits_expense_debtor",
    ),
)

settlements = Table(
    "settlements",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("group_id", Integer, ForeignKey("groups.id"), nullable=False),
    Column("payer_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("receiver_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("amount", Numeric(asdecimal=True), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    CheckConstraint("amount > 0", name="ck_settlements_amount_positive"),
    CheckConstraint(
        "payer_id <> receiver_id",
        name="ck_settlements_distinct_parties",
    ),
)


def create_schema(engine: Engine) -> None:
    """Create every ledger table that does not exist yet."""
    metadata.create_all(engine)


__all__ = [
    "metadata",
    "users",
    "groups",
    "memberships",
    "expenses",
    "splits",
    "settlements",
    "create_schema",
]
