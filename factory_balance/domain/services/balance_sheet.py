"""Domain services composing the consolidated balance sheet."""

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from factory_balance.domain.constants import (
    CUSTOMER,
    NO_LIABILITY_COVERAGE,
    SUPPLIER,
    TOP_RANKING_SIZE,
)
from factory_balance.domain.models import (
    AssetTotals,
    BalanceSheetSnapshot,
    CounterpartyBalance,
    InventoryCategoryBreakdown,
    LiabilityTotals,
    QuickSummary,
    TreasuryAccountBreakdown,
)
from factory_balance.utils.decimal_utils import round_half_up


def compose_balance_sheet(
    inventory: Sequence[InventoryCategoryBreakdown],
    treasury: Sequence[TreasuryAccountBreakdown],
    counterparties: Sequence[CounterpartyBalance],
    *,
    generated_at: datetime,
) -> BalanceSheetSnapshot:
    """Combine the three ledgers into a balance sheet snapshot.

    Customers with a positive balance are receivables and suppliers with a
    negative balance are payables. Customer credits and supplier
    prepayments are left out of both sides. Totals are never rounded; only
    the coverage ratio is rounded, after it is computed.

    Args:
        inventory: Category breakdowns in fixed category order.
        treasury: Treasury account breakdowns.
        counterparties: Non-zero counterparty balances, in source order.
        generated_at: Timestamp recorded on the snapshot.

    Returns:
        BalanceSheetSnapshot: The composed report.
    """
    inventory_total = sum((item.value for item in inventory), Decimal("0"))
    cash_total = sum((account.balance for account in treasury), Decimal("0"))

    receivables = [
        party
        for party in counterparties
        if party.party_type == CUSTOMER and party.balance > 0
    ]
    payables = [
        party
        for party in counterparties
        if party.party_type == SUPPLIER and party.balance < 0
    ]
    receivables_total = sum(
        (party.balance for party in receivables),
        Decimal("0"),
    )
    payables_total = abs(
        sum((party.balance for party in payables), Decimal("0"))
    )

    asset_total = inventory_total + cash_total + receivables_total
    liability_total = payables_total

    top_receivables = sorted(
        receivables,
        key=lambda party: party.balance,
        reverse=True,
    )[:TOP_RANKING_SIZE]
    top_payables = [
        replace(party, balance=abs(party.balance))
        for party in sorted(payables, key=lambda party: party.balance)[
            :TOP_RANKING_SIZE
        ]
    ]

    return BalanceSheetSnapshot(
        assets=AssetTotals(
            inventory=inventory_total,
            cash=cash_total,
            receivables=receivables_total,
            total=asset_total,
        ),
        liabilities=LiabilityTotals(
            payables=payables_total,
            total=liability_total,
        ),
        net_position=asset_total - liability_total,
        coverage_ratio=compute_coverage_ratio(asset_total, liability_total),
        inventory_breakdown=tuple(inventory),
        treasury_breakdown=tuple(treasury),
        top_receivables=tuple(top_receivables),
        top_payables=tuple(top_payables),
        customers_with_debt=len(receivables),
        suppliers_we_owe=len(payables),
        generated_at=generated_at,
    )


def compute_coverage_ratio(
    asset_total: Decimal,
    liability_total: Decimal,
) -> int:
    """Return assets as a whole percentage of liabilities.

    Args:
        asset_total: Unrounded total assets.
        liability_total: Unrounded total liabilities.

    Returns:
        int: Rounded percentage, or 100 when there are no liabilities.
    """
    if liability_total <= 0:
        return NO_LIABILITY_COVERAGE
    return round_half_up(asset_total / liability_total * Decimal("100"))


def project_quick_summary(snapshot: BalanceSheetSnapshot) -> QuickSummary:
    """Reduce a snapshot to the four headline fields."""
    if snapshot.net_position > 0:
        status = "positive"
    elif snapshot.net_position < 0:
        status = "negative"
    else:
        status = "balanced"
    return QuickSummary(
        net_position=snapshot.net_position,
        total_assets=snapshot.assets.total,
        total_liabilities=snapshot.liabilities.total,
        status=status,
    )


__all__ = [
    "compose_balance_sheet",
    "compute_coverage_ratio",
    "project_quick_summary",
]
