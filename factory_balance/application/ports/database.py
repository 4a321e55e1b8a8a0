"""Database ports for the balance-sheet engine.

This module defines the application-layer protocol for accessing the
store engine. Infrastructure implementations are expected to provide a
concrete adapter that satisfies this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the operational store.

    Repositories depend on this protocol instead of concrete database
    drivers or configuration details.
    """

    def get_store_engine(self) -> Engine:
        """Get the engine for the operational store.

        Returns:
            Engine: SQLAlchemy engine connected to the store.
        """


__all__ = ["DatabaseEnginePort"]
