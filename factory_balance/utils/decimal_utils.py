"""Helpers for Decimal normalization."""

from decimal import ROUND_FLOOR, Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Args:
        value: Unrounded Decimal value.

    Returns:
        int: floor(value + 0.5).
    """
    return int((value + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR))


__all__ = ["coerce_decimal", "round_half_up"]
