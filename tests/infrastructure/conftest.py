"""Fixtures providing an in-memory SQLite ledger store."""

import pytest
from sqlalchemy import create_engine, insert
from sqlalchemy.pool import StaticPool

from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.schema import create_schema, groups, memberships, users


@pytest.fixture
def sqlite_engine():
    """Engine with the ledger schema, two groups and four users."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        future=True,
    )
    create_schema(engine)
    with engine.begin() as conn:
        conn.execute(
            insert(users),
            [
                {"id": 1, "username": "alice"},
                {"id": 2, "username": "bob"},
                {"id": 3, "username": "carol"},
                {"id": 4, "username": "dave"},
            ],
        )
        conn.execute(
            insert(groups),
            [
                {"id": 10, "name": "Flat", "owner_id": 1},
                {"id": 20, "name": "Trip", "owner_id": 4},
            ],
        )
        conn.execute(
            insert(memberships),
            [
                {"user_id": 1, "group_id": 10},
                {"user_id": 2, "group_id": 10},
                {"user_id": 3, "group_id": 10},
                {"user_id": 1, "group_id": 20},
                {"user_id": 4, "group_id": 20},
            ],
        )
    yield engine
    engine.dispose()


@pytest.fixture
def db_port(sqlite_engine):
    return SqlAlchemyDatabaseEngineAdapter(engine=sqlite_engine)
