"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.membership_repository import (
    MembershipRepositoryPort,
)
from src.application.use_cases.create_expense import CreateExpenseUseCase
from src.application.use_cases.delete_expense import DeleteExpenseUseCase
from src.application.use_cases.edit_expense import EditExpenseUseCase
from src.application.use_cases.get_group_balances import (
    GetGroupBalancesUseCase,
)
from src.application.use_cases.get_group_history import (
    GetGroupHistoryUseCase,
)
from src.application.use_cases.get_group_members import (
    GetGroupMembersUseCase,
)
from src.application.use_cases.record_settlement import (
    RecordSettlementUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.membership_repository import (
    SqlAlchemyMembershipRepository,
)
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_membership_repository(
    db_port: DatabaseEnginePort | None = None,
) -> MembershipRepositoryPort:
    """Return the membership repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyMembershipRepository(resolved_db)


def build_create_expense_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> CreateExpenseUseCase:
    """Return the expense creation use case."""
    resolved_db = db_port or build_database_adapter()
    settings = LedgerSettings.from_env()
    return CreateExpenseUseCase(
        build_ledger_repository(resolved_db),
        build_membership_repository(resolved_db),
        split_quantum=settings.split_quantum,
        logger=get_app_logger(),
    )


def build_edit_expense_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> EditExpenseUseCase:
    """Return the expense edit use case."""
    resolved_db = db_port or build_database_adapter()
    settings = LedgerSettings.from_env()
    return EditExpenseUseCase(
        build_ledger_repository(resolved_db),
        build_membership_repository(resolved_db),
        split_quantum=settings.split_quantum,
        logger=get_app_logger(),
    )


def build_delete_expense_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> DeleteExpenseUseCase:
    """Return the expense deletion use case."""
    resolved_db = db_port or build_database_adapter()
    return DeleteExpenseUseCase(
        build_ledger_repository(resolved_db),
        build_membership_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_record_settlement_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> RecordSettlementUseCase:
    """Return the settlement recording use case."""
    resolved_db = db_port or build_database_adapter()
    return RecordSettlementUseCase(
        build_ledger_repository(resolved_db),
        build_membership_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_group_balances_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetGroupBalancesUseCase:
    """Return the balance calculator use case."""
    resolved_db = db_port or build_database_adapter()
    return GetGroupBalancesUseCase(
        build_ledger_repository(resolved_db),
        build_membership_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_group_history_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetGroupHistoryUseCase:
    """Return the history merger use case."""
    resolved_db = db_port or build_database_adapter()
    return GetGroupHistoryUseCase(
        build_ledger_repository(resolved_db),
        build_membership_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_group_members_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetGroupMembersUseCase:
    """Return the group members use case."""
    resolved_db = db_port or build_database_adapter()
    return GetGroupMembersUseCase(
        build_membership_repository(resolved_db),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_membership_repository",
    "build_create_expense_use_case",
    "build_edit_expense_use_case",
    "build_delete_expense_use_case",
    "build_record_settlement_use_case",
    "build_group_balances_use_case",
    "build_group_history_use_case",
    "build_group_members_use_case",
]
