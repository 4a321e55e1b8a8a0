"""Domain models package."""

from .balance_sheet import (
    AssetTotals,
    BalanceSheetInsights,
    BalanceSheetSnapshot,
    CounterpartyBalance,
    InventoryCategoryBreakdown,
    LiabilityTotals,
    QuickSummary,
    TreasuryAccountBreakdown,
)
from .source_rows import (
    CounterpartyRow,
    InventoryRecordRow,
    TreasuryAccountRow,
)

__all__ = [
    "AssetTotals",
    "BalanceSheetInsights",
    "BalanceSheetSnapshot",
    "CounterpartyBalance",
    "InventoryCategoryBreakdown",
    "LiabilityTotals",
    "QuickSummary",
    "TreasuryAccountBreakdown",
    "CounterpartyRow",
    "InventoryRecordRow",
    "TreasuryAccountRow",
]
