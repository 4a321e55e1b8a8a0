"""Application port for read access to the operational ledgers."""

from typing import Protocol

from factory_balance.domain.models import (
    CounterpartyRow,
    InventoryRecordRow,
    TreasuryAccountRow,
)


class LedgerRepositoryPort(Protocol):
    """Port exposing read-only access to inventory, treasury and parties.

    Implementations may be called from several threads at once.
    """

    def fetch_inventory_records(
        self,
        category: str,
    ) -> list[InventoryRecordRow]:
        """Return the records of an inventory category (raw, packaging,
        semi or finished)."""

    def fetch_treasury_accounts(self) -> list[TreasuryAccountRow]:
        """Return all treasury accounts, largest balance first."""

    def fetch_nonzero_counterparties(self) -> list[CounterpartyRow]:
        """Return customers and suppliers whose balance is not zero,
        largest balance first."""


__all__ = ["LedgerRepositoryPort"]
