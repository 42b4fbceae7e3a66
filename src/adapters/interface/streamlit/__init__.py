"""Streamlit interface for the group ledger."""

__all__ = []
