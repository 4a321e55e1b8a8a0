"""Use case to summarize the balance sheet for dashboard tiles."""

from factory_balance.application.use_cases.get_balance_sheet import (
    GetBalanceSheetUseCase,
)
from factory_balance.domain.models import QuickSummary
from factory_balance.domain.services.balance_sheet import project_quick_summary


class GetQuickSummaryUseCase:
    """Project the full balance sheet onto four headline fields.

    The full snapshot is recomputed on every call.
    """

    def __init__(self, balance_sheet: GetBalanceSheetUseCase) -> None:
        """Initialize the use case.

        Args:
            balance_sheet: Use case composing the full snapshot.
        """
        self._balance_sheet = balance_sheet

    def execute(self) -> QuickSummary:
        """Return net position, totals and a positive/negative/balanced
        status."""
        return project_quick_summary(self._balance_sheet.execute())


__all__ = ["GetQuickSummaryUseCase", "QuickSummary"]
