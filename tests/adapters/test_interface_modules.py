"""Checks on the layout of the interface adapter packages."""

from importlib import import_module


def test_interface_packages_export_nothing() -> None:
    """Package initializers should stay free of re-exports."""
    for name in (
        "src.adapters.interface",
        "src.adapters.interface.streamlit",
    ):
        assert import_module(name).__all__ == []


def test_streamlit_app_exposes_entry_point() -> None:
    """The page module should be runnable through its main function."""
    module = import_module("src.adapters.interface.streamlit.app")

    assert callable(module.main)
