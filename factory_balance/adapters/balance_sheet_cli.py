"""CLI adapter printing the consolidated balance sheet.

This module wires the balance sheet use cases through the composition root
and renders the result as plain text. A source failure is reported as an
error with exit status 1; an empty store prints a zero-valued report.
"""

import argparse
import sys

from factory_balance.domain.errors import SourceUnavailableError
from factory_balance.domain.models import (
    BalanceSheetInsights,
    BalanceSheetSnapshot,
    CounterpartyBalance,
    QuickSummary,
)
from factory_balance.infrastructure.container import (
    build_balance_sheet_use_case,
    build_insights_use_case,
    build_quick_summary_use_case,
)
from factory_balance.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the consolidated balance sheet.",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print only net position, totals and status.",
    )
    return parser.parse_args(argv)


def _print_summary(summary: QuickSummary) -> None:
    print(
        f"Net position: {summary.net_position} ({summary.status}) | "
        f"assets={summary.total_assets}, "
        f"liabilities={summary.total_liabilities}"
    )


def _print_ranking(title: str, parties: tuple[CounterpartyBalance, ...]) -> None:
    print(title)
    if not parties:
        print("  (none)")
        return
    for party in parties:
        contact = f" [{party.phone}]" if party.phone else ""
        print(f"  {party.name}{contact}: {party.balance}")


def _print_report(
    snapshot: BalanceSheetSnapshot,
    insights: BalanceSheetInsights,
) -> None:
    print(f"Balance sheet generated at {snapshot.generated_at.isoformat()}")
    print(
        f"Assets: total={snapshot.assets.total}, "
        f"inventory={snapshot.assets.inventory}, "
        f"cash={snapshot.assets.cash}, "
        f"receivables={snapshot.assets.receivables}"
    )
    print(
        f"Liabilities: total={snapshot.liabilities.total}, "
        f"payables={snapshot.liabilities.payables}"
    )
    print(
        f"Net position: {snapshot.net_position} | "
        f"coverage={snapshot.coverage_ratio}% ({insights.coverage_grade})"
    )
    print("Inventory:")
    for item in snapshot.inventory_breakdown:
        print(f"  {item.label}: {item.count} items, value={item.value}")
    print("Treasury:")
    for account in snapshot.treasury_breakdown:
        print(f"  {account.name} ({account.account_type}): {account.balance}")
    _print_ranking(
        f"Top receivables ({snapshot.customers_with_debt} customers owe us):",
        snapshot.top_receivables,
    )
    _print_ranking(
        f"Top payables ({snapshot.suppliers_we_owe} suppliers we owe):",
        snapshot.top_payables,
    )
    if insights.cash_covers_payables:
        print("Cash covers all supplier debts.")
    else:
        print(f"Cash shortfall against suppliers: {insights.cash_shortfall}")
    print(
        f"Inventory is {insights.inventory_share_pct}% of assets; "
        f"largest component: {insights.largest_asset_component}."
    )


def main(argv: list[str] | None = None) -> int:
    """Compute and print the balance sheet.

    Args:
        argv: Optional argument list (defaults to ``sys.argv``).

    Returns:
        int: Process exit status.
    """
    args = _parse_args(argv)
    logger = get_app_logger()
    get_usage_logger().info(
        f"balance_sheet_cli invoked (summary={args.summary})"
    )
    try:
        balance_sheet = build_balance_sheet_use_case()
    except ValueError as exc:
        logger.error(f"Invalid balance sheet configuration: {exc}")
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    try:
        if args.summary:
            summary_use_case = build_quick_summary_use_case(
                balance_sheet=balance_sheet
            )
            _print_summary(summary_use_case.execute())
            return 0
        snapshot = balance_sheet.execute()
    except SourceUnavailableError as exc:
        logger.error(f"Balance sheet unavailable ({exc.source}): {exc}")
        print(f"Could not compute the balance sheet: {exc}", file=sys.stderr)
        return 1

    insights_use_case = build_insights_use_case(balance_sheet=balance_sheet)
    _print_report(snapshot, insights_use_case.execute(snapshot))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
