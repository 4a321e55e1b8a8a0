"""Simple CLI to validate the store connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer and runs a basic health
check against the operational store.
"""

from factory_balance.infrastructure.container import build_database_adapter
from factory_balance.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a basic connectivity check against the configured store."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    store_engine = adapter.get_store_engine()
    logger.info(f"Store DB: {store_engine.url}")

    with store_engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info("Store connection is working.")


if __name__ == "__main__":  # pragma: no cover
    main()
