"""Tests for infrastructure settings."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import LedgerSettings


@pytest.fixture(autouse=True)
def _quiet_logger(monkeypatch):
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    return logger


def test_from_env_defaults(monkeypatch) -> None:
    """Unset variables should fall back to cents and EUR."""
    monkeypatch.delenv("LEDGER_SPLIT_QUANTUM", raising=False)
    monkeypatch.delenv("LEDGER_CURRENCY", raising=False)

    settings = LedgerSettings.from_env()

    assert settings.split_quantum == Decimal("0.01")
    assert settings.currency_code == "EUR"


def test_from_env_reads_values(monkeypatch) -> None:
    """Explicit values should be parsed and normalized."""
    monkeypatch.setenv("LEDGER_SPLIT_QUANTUM", "1")
    monkeypatch.setenv("LEDGER_CURRENCY", " usd ")

    settings = LedgerSettings.from_env()

    assert settings.split_quantum == Decimal("1")
    assert settings.currency_code == "USD"


@pytest.mark.parametrize("raw", ["none", "OFF", " exact "])
def test_from_env_can_disable_rounding(monkeypatch, raw) -> None:
    """Disabled quantum keywords should map to None."""
    monkeypatch.setenv("LEDGER_SPLIT_QUANTUM", raw)

    assert LedgerSettings.from_env().split_quantum is None


@pytest.mark.parametrize("raw", ["abc", "-0.01", "0", "nan"])
def test_from_env_warns_on_invalid_quantum(monkeypatch, _quiet_logger, raw):
    """Invalid quantum values should warn and keep the default."""
    monkeypatch.setenv("LEDGER_SPLIT_QUANTUM", raw)

    settings = LedgerSettings.from_env()

    assert settings.split_quantum == Decimal("0.01")
    _quiet_logger.warning.assert_called_once()
