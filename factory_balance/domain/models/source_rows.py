"""Domain models for raw rows read from the store."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class InventoryRecordRow:
    """Row representing one stocked item of an inventory category."""

    record_id: int | str | None
    quantity: Decimal | None
    unit_cost: Decimal | None


@dataclass(frozen=True)
class TreasuryAccountRow:
    """Row representing a cash box or bank account."""

    account_id: int
    name: str
    account_type: str | None
    balance: Decimal | None


@dataclass(frozen=True)
class CounterpartyRow:
    """Row representing a customer or supplier running balance."""

    party_id: str
    name: str
    party_type: str | None
    balance: Decimal | None
    phone: str | None = None


__all__ = ["InventoryRecordRow", "TreasuryAccountRow", "CounterpartyRow"]
