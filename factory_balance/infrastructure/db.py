"""Database infrastructure for the balance-sheet engine.

This module exposes concrete helpers to create and reuse a SQLAlchemy
engine connected to the operational store. It belongs to the
infrastructure layer because it deals with external systems.
"""

import os
import threading
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from factory_balance.application.ports.database import DatabaseEnginePort


STORE_URL_VAR = "FACTORY_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Values from a local ``.env`` file are loaded first.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for the store.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled. The pool is sized for the concurrent report
        reads.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_store_engine: Optional[Engine] = None
_store_engine_lock = threading.Lock()


def get_store_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the operational store.

    Returns:
        Engine: Lazily initialized engine connected to the store.
    """
    global _store_engine
    if _store_engine is None:
        with _store_engine_lock:
            if _store_engine is None:
                db_url = _get_env_var(STORE_URL_VAR)
                _store_engine = _create_engine(db_url)
    return _store_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so repositories can depend only on the protocol.
    """

    def get_store_engine(self) -> Engine:
        """Get the engine for the operational store.

        Returns:
            Engine: SQLAlchemy engine connected to the store.
        """
        return get_store_engine()


__all__ = [
    "get_store_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
