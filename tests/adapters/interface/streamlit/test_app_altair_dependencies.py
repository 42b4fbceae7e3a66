"""Tests for the chart dependency probe of the Streamlit page."""

import sys
import types

import pytest

from src.adapters.interface.streamlit import app


def _install(monkeypatch, numpy_attrs: dict, pandas_attrs: dict) -> None:
    monkeypatch.setitem(
        sys.modules,
        "numpy",
        types.SimpleNamespace(**numpy_attrs),
    )
    monkeypatch.setitem(
        sys.modules,
        "pandas",
        types.SimpleNamespace(**pandas_attrs),
    )


def test_check_altair_dependencies_ok(monkeypatch) -> None:
    """Complete numpy and pandas modules should allow charts."""
    _install(monkeypatch, {"ndarray": object}, {"Timestamp": object})

    assert app._check_altair_dependencies() == (True, None)


@pytest.mark.parametrize(
    ("numpy_attrs", "pandas_attrs", "culprit"),
    [
        ({}, {"Timestamp": object}, "numpy"),
        ({"ndarray": object}, {}, "pandas"),
    ],
)
def test_check_altair_dependencies_reports_broken_module(
    monkeypatch,
    numpy_attrs,
    pandas_attrs,
    culprit,
) -> None:
    """Incomplete imports should disable charts and name the module."""
    _install(monkeypatch, numpy_attrs, pandas_attrs)

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert culprit in message
