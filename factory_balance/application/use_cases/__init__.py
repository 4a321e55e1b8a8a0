"""Application use cases package."""

from .get_balance_sheet import GetBalanceSheetUseCase, BalanceSheetSnapshot
from .get_balance_sheet_insights import (
    GetBalanceSheetInsightsUseCase,
    BalanceSheetInsights,
)
from .get_inventory_valuation import (
    GetInventoryValuationUseCase,
    InventoryCategoryBreakdown,
)
from .get_parties_balances import (
    GetPartiesBalancesUseCase,
    CounterpartyBalance,
)
from .get_quick_summary import GetQuickSummaryUseCase, QuickSummary
from .get_treasury_balances import (
    GetTreasuryBalancesUseCase,
    TreasuryAccountBreakdown,
)

__all__ = [
    "GetBalanceSheetUseCase",
    "BalanceSheetSnapshot",
    "GetBalanceSheetInsightsUseCase",
    "BalanceSheetInsights",
    "GetInventoryValuationUseCase",
    "InventoryCategoryBreakdown",
    "GetPartiesBalancesUseCase",
    "CounterpartyBalance",
    "GetQuickSummaryUseCase",
    "QuickSummary",
    "GetTreasuryBalancesUseCase",
    "TreasuryAccountBreakdown",
]
