"""SQLAlchemy-backed repository for inventory, treasury and party ledgers."""

from sqlalchemy import text

from factory_balance.application.ports.database import DatabaseEnginePort
from factory_balance.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from factory_balance.domain.constants import INVENTORY_CATEGORIES
from factory_balance.domain.models import (
    CounterpartyRow,
    InventoryRecordRow,
    TreasuryAccountRow,
)
from factory_balance.utils.decimal_utils import coerce_decimal


INVENTORY_TABLES = {
    category: table for category, _, table in INVENTORY_CATEGORIES
}


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for balance-sheet reads."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the store engine.
        """
        self._db_port = db_port

    def fetch_inventory_records(
        self,
        category: str,
    ) -> list[InventoryRecordRow]:
        table = INVENTORY_TABLES.get(category)
        if table is None:
            raise ValueError(f"Unknown inventory category: {category}")
        # Table names come from INVENTORY_CATEGORIES, never from callers.
        query = text(f"SELECT id, quantity, unit_cost FROM {table}")
        engine = self._db_port.get_store_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            InventoryRecordRow(
                record_id=row.id,
                quantity=(
                    None if row.quantity is None
                    else coerce_decimal(row.quantity)
                ),
                unit_cost=(
                    None if row.unit_cost is None
                    else coerce_decimal(row.unit_cost)
                ),
            )
            for row in rows
        ]

    def fetch_treasury_accounts(self) -> list[TreasuryAccountRow]:
        query = text(
            """
            SELECT id, name, type, balance
            FROM treasuries
            ORDER BY balance DESC
            """
        )
        engine = self._db_port.get_store_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            TreasuryAccountRow(
                account_id=row.id,
                name=row.name,
                account_type=row.type,
                balance=coerce_decimal(row.balance),
            )
            for row in rows
        ]

    def fetch_nonzero_counterparties(self) -> list[CounterpartyRow]:
        query = text(
            """
            SELECT id, name, type, balance, phone
            FROM parties
            WHERE balance <> 0
            ORDER BY balance DESC
            """
        )
        engine = self._db_port.get_store_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            CounterpartyRow(
                party_id=str(row.id),
                name=row.name,
                party_type=row.type,
                balance=coerce_decimal(row.balance),
                phone=row.phone,
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyLedgerRepository", "INVENTORY_TABLES"]
