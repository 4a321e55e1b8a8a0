"""Domain services package."""

from .balance_sheet import (
    compose_balance_sheet,
    compute_coverage_ratio,
    project_quick_summary,
)
from .insights import grade_coverage, read_balance_sheet
from .ledgers import (
    build_counterparty_balances,
    build_treasury_breakdown,
    empty_inventory_category,
    value_inventory_category,
)
from .normalization import normalize_kind, normalize_name
from .validation import validate_kind, validate_treasury_balance

__all__ = [
    "compose_balance_sheet",
    "compute_coverage_ratio",
    "project_quick_summary",
    "grade_coverage",
    "read_balance_sheet",
    "build_counterparty_balances",
    "build_treasury_breakdown",
    "empty_inventory_category",
    "value_inventory_category",
    "normalize_kind",
    "normalize_name",
    "validate_kind",
    "validate_treasury_balance",
]
