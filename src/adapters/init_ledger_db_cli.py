"""CLI adapter to create the ledger tables.

This module wires the schema helper to the concrete database adapter and
provides a command-line entry point for preparing a fresh database.
"""

from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import create_schema, metadata


def main() -> None:
    """Create every missing ledger table."""
    logger = get_app_logger()
    db_adapter = SqlAlchemyDatabaseEngineAdapter()
    engine = db_adapter.get_ledger_engine()

    create_schema(engine)
    logger.info(f"Ledger schema ready on {engine.url}")

    print(
        f"Created or verified {len(metadata.sorted_tables)} ledger tables."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
