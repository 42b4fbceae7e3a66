"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_repository import (
    ExpenseDraft,
    LedgerRepositoryPort,
    LedgerUnitOfWorkPort,
    SettlementDraft,
)
from .membership_repository import MembershipRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "ExpenseDraft",
    "LedgerRepositoryPort",
    "LedgerUnitOfWorkPort",
    "MembershipRepositoryPort",
    "SettlementDraft",
]
