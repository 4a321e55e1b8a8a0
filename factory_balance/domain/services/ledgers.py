"""Domain services turning store rows into per-ledger breakdowns."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from factory_balance.domain.constants import COUNTERPARTY_TYPES, TREASURY_TYPES
from factory_balance.domain.models import (
    CounterpartyBalance,
    CounterpartyRow,
    InventoryCategoryBreakdown,
    InventoryRecordRow,
    TreasuryAccountBreakdown,
    TreasuryAccountRow,
)
from factory_balance.domain.services.normalization import (
    normalize_kind,
    normalize_name,
)
from factory_balance.domain.services.validation import (
    validate_kind,
    validate_treasury_balance,
)
from factory_balance.utils.decimal_utils import coerce_decimal


def value_inventory_category(
    category: str,
    label: str,
    records: Iterable[InventoryRecordRow],
) -> InventoryCategoryBreakdown:
    """Reduce the records of one category to a count and a total value.

    Missing quantities or unit costs count as zero.

    Args:
        category: Category tag.
        label: Human readable category name.
        records: Records read for the category.

    Returns:
        InventoryCategoryBreakdown: Record count and stock value.
    """
    count = 0
    value = Decimal("0")
    for record in records:
        count += 1
        value += coerce_decimal(record.quantity) * coerce_decimal(
            record.unit_cost
        )
    return InventoryCategoryBreakdown(
        category=category,
        label=label,
        count=count,
        value=value,
    )


def empty_inventory_category(
    category: str,
    label: str,
) -> InventoryCategoryBreakdown:
    """Return the zero breakdown used when a category cannot be read."""
    return InventoryCategoryBreakdown(
        category=category,
        label=label,
        count=0,
        value=Decimal("0"),
    )


def build_treasury_breakdown(
    rows: Iterable[TreasuryAccountRow],
    logger: Logger,
) -> list[TreasuryAccountBreakdown]:
    """Map treasury rows to breakdowns sorted by descending balance.

    Args:
        rows: Treasury account rows from the repository.
        logger: Logger used for sign and type warnings.

    Returns:
        list[TreasuryAccountBreakdown]: Accounts, largest balance first.
    """
    accounts = []
    for row in rows:
        account_type = normalize_kind(row.account_type)
        validate_kind(account_type, TREASURY_TYPES, "treasury", logger)
        balance = coerce_decimal(row.balance)
        name = normalize_name(row.name)
        validate_treasury_balance(name, balance, logger)
        accounts.append(
            TreasuryAccountBreakdown(
                account_id=row.account_id,
                name=name,
                account_type=account_type or "",
                balance=balance,
            )
        )
    return sorted(accounts, key=lambda item: item.balance, reverse=True)


def build_counterparty_balances(
    rows: Iterable[CounterpartyRow],
    logger: Logger,
) -> list[CounterpartyBalance]:
    """Map counterparty rows to non-zero balances sorted descending.

    Args:
        rows: Counterparty rows from the repository.
        logger: Logger used for type warnings.

    Returns:
        list[CounterpartyBalance]: Non-zero balances, largest first.
    """
    balances = []
    for row in rows:
        balance = coerce_decimal(row.balance)
        if balance == 0:
            continue
        party_type = normalize_kind(row.party_type)
        validate_kind(party_type, COUNTERPARTY_TYPES, "counterparty", logger)
        balances.append(
            CounterpartyBalance(
                party_id=row.party_id,
                name=normalize_name(row.name),
                party_type=party_type or "",
                balance=balance,
                phone=row.phone,
            )
        )
    return sorted(balances, key=lambda item: item.balance, reverse=True)


__all__ = [
    "value_inventory_category",
    "empty_inventory_category",
    "build_treasury_breakdown",
    "build_counterparty_balances",
]
