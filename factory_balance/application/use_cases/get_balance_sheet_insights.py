"""Use case to read a balance sheet qualitatively."""

from factory_balance.application.use_cases.get_balance_sheet import (
    GetBalanceSheetUseCase,
)
from factory_balance.domain.models import (
    BalanceSheetInsights,
    BalanceSheetSnapshot,
)
from factory_balance.domain.services.insights import read_balance_sheet


class GetBalanceSheetInsightsUseCase:
    """Derive coverage grade, liquidity and composition readings."""

    def __init__(self, balance_sheet: GetBalanceSheetUseCase) -> None:
        self._balance_sheet = balance_sheet

    def execute(
        self,
        snapshot: BalanceSheetSnapshot | None = None,
    ) -> BalanceSheetInsights:
        """Read ``snapshot``, or a freshly composed one when omitted.

        Raises:
            SourceUnavailableError: A fresh composition failed.
        """
        if snapshot is None:
            snapshot = self._balance_sheet.execute()
        return read_balance_sheet(snapshot)


__all__ = ["GetBalanceSheetInsightsUseCase", "BalanceSheetInsights"]
