"""Tests for the init_ledger_db_cli adapter."""

from unittest.mock import MagicMock

from sqlalchemy import create_engine, inspect

from src.adapters import init_ledger_db_cli


def test_main_creates_every_table(monkeypatch, capsys, tmp_path):
    """The CLI should create the ledger tables on the configured engine."""
    engine = create_engine(f"sqlite:///{tmp_path / 'ledger.db'}")

    class _Adapter:
        def get_ledger_engine(self):
            return engine

    monkeypatch.setattr(
        init_ledger_db_cli,
        "SqlAlchemyDatabaseEngineAdapter",
        lambda: _Adapter(),
    )
    monkeypatch.setattr(init_ledger_db_cli, "get_app_logger", MagicMock)

    init_ledger_db_cli.main()

    assert set(inspect(engine).get_table_names()) == {
        "users",
        "groups",
        "memberships",
        "expenses",
        "splits",
        "settlements",
    }
    assert "Created or verified 6 ledger tables." in capsys.readouterr().out
    engine.dispose()
