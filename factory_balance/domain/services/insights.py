"""Qualitative reading of a balance sheet snapshot."""

from decimal import Decimal

from factory_balance.domain.constants import (
    COVERAGE_GAUGE_CAP,
    COVERAGE_GRADE_WARNING,
    COVERAGE_GRADES,
)
from factory_balance.domain.models import (
    BalanceSheetInsights,
    BalanceSheetSnapshot,
)
from factory_balance.utils.decimal_utils import round_half_up


def grade_coverage(coverage_ratio: int) -> str:
    """Return the coverage grade for a rounded coverage ratio."""
    for threshold, grade in COVERAGE_GRADES:
        if coverage_ratio >= threshold:
            return grade
    return COVERAGE_GRADE_WARNING


def read_balance_sheet(snapshot: BalanceSheetSnapshot) -> BalanceSheetInsights:
    """Derive liquidity, coverage and composition readings.

    Args:
        snapshot: Composed balance sheet.

    Returns:
        BalanceSheetInsights: Qualitative reading of the snapshot.
    """
    assets = snapshot.assets
    payables = snapshot.liabilities.payables

    if assets.total == 0:
        inventory_share = 0
    else:
        inventory_share = round_half_up(
            assets.inventory / assets.total * Decimal("100")
        )

    # First maximum wins, so ties resolve inventory, cash, receivables.
    components = (
        ("inventory", assets.inventory),
        ("cash", assets.cash),
        ("receivables", assets.receivables),
    )
    largest = max(components, key=lambda item: item[1])[0]

    gauge = Decimal(min(snapshot.coverage_ratio, COVERAGE_GAUGE_CAP)) / 2

    return BalanceSheetInsights(
        coverage_grade=grade_coverage(snapshot.coverage_ratio),
        coverage_gauge_pct=gauge,
        cash_covers_payables=assets.cash >= payables,
        cash_shortfall=max(payables - assets.cash, Decimal("0")),
        inventory_share_pct=inventory_share,
        largest_asset_component=largest,
    )


__all__ = ["grade_coverage", "read_balance_sheet"]
