"""Domain models for the consolidated balance sheet."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Literal


SummaryStatus = Literal["positive", "negative", "balanced"]


@dataclass(frozen=True)
class InventoryCategoryBreakdown:
    """Count and value of the stock held in one inventory category.

    Attributes:
        category: Category tag (raw, packaging, semi, finished).
        label: Human readable category name.
        count: Number of records in the category.
        value: Sum of quantity times unit cost over the records.
    """

    category: str
    label: str
    count: int
    value: Decimal


@dataclass(frozen=True)
class TreasuryAccountBreakdown:
    """Balance held in a single cash box or bank account."""

    account_id: int
    name: str
    account_type: str
    balance: Decimal


@dataclass(frozen=True)
class CounterpartyBalance:
    """Signed running balance of a customer or supplier.

    A positive customer balance is owed to the operation; a negative
    supplier balance is owed by the operation.
    """

    party_id: str
    name: str
    party_type: str
    balance: Decimal
    phone: str | None = None


@dataclass(frozen=True)
class AssetTotals:
    """Asset side of the balance sheet."""

    inventory: Decimal
    cash: Decimal
    receivables: Decimal
    total: Decimal


@dataclass(frozen=True)
class LiabilityTotals:
    """Liability side of the balance sheet."""

    payables: Decimal
    total: Decimal


@dataclass(frozen=True)
class BalanceSheetSnapshot:
    """Point-in-time financial position of the operation.

    Attributes:
        assets: Inventory, cash and receivable totals.
        liabilities: Payable totals.
        net_position: Total assets minus total liabilities.
        coverage_ratio: Assets as a percentage of liabilities (100 when
            there are no liabilities).
        inventory_breakdown: One entry per inventory category, fixed order.
        treasury_breakdown: All treasury accounts.
        top_receivables: Largest customer debts, at most five.
        top_payables: Largest supplier debts as positive amounts, at most
            five.
        customers_with_debt: Number of customers owing money.
        suppliers_we_owe: Number of suppliers owed money.
        generated_at: Moment the snapshot was composed.
    """

    assets: AssetTotals
    liabilities: LiabilityTotals
    net_position: Decimal
    coverage_ratio: int
    inventory_breakdown: tuple[InventoryCategoryBreakdown, ...]
    treasury_breakdown: tuple[TreasuryAccountBreakdown, ...]
    top_receivables: tuple[CounterpartyBalance, ...]
    top_payables: tuple[CounterpartyBalance, ...]
    customers_with_debt: int
    suppliers_we_owe: int
    generated_at: datetime


@dataclass(frozen=True)
class QuickSummary:
    """Headline figures for dashboard tiles."""

    net_position: Decimal
    total_assets: Decimal
    total_liabilities: Decimal
    status: SummaryStatus


@dataclass(frozen=True)
class BalanceSheetInsights:
    """Qualitative reading of a balance sheet snapshot."""

    coverage_grade: str
    coverage_gauge_pct: Decimal
    cash_covers_payables: bool
    cash_shortfall: Decimal
    inventory_share_pct: int
    largest_asset_component: str


__all__ = [
    "SummaryStatus",
    "InventoryCategoryBreakdown",
    "TreasuryAccountBreakdown",
    "CounterpartyBalance",
    "AssetTotals",
    "LiabilityTotals",
    "BalanceSheetSnapshot",
    "QuickSummary",
    "BalanceSheetInsights",
]
