"""Domain constants for balance-sheet aggregation."""

INVENTORY_CATEGORIES = (
    ("raw", "Raw materials", "raw_materials"),
    ("packaging", "Packaging materials", "packaging_materials"),
    ("semi", "Semi-finished goods", "semi_finished_products"),
    ("finished", "Finished goods", "finished_products"),
)

TREASURY_TYPES = ("cash", "bank")

CUSTOMER = "customer"
SUPPLIER = "supplier"
COUNTERPARTY_TYPES = (CUSTOMER, SUPPLIER)

TOP_RANKING_SIZE = 5

# Coverage ratio reported when there are no liabilities.
NO_LIABILITY_COVERAGE = 100

COVERAGE_GRADES = (
    (200, "excellent"),
    (150, "very_good"),
    (100, "good"),
)
COVERAGE_GRADE_WARNING = "warning"
COVERAGE_GAUGE_CAP = 200


__all__ = [
    "INVENTORY_CATEGORIES",
    "TREASURY_TYPES",
    "CUSTOMER",
    "SUPPLIER",
    "COUNTERPARTY_TYPES",
    "TOP_RANKING_SIZE",
    "NO_LIABILITY_COVERAGE",
    "COVERAGE_GRADES",
    "COVERAGE_GRADE_WARNING",
    "COVERAGE_GAUGE_CAP",
]
