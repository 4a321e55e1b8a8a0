"""Domain validation helpers."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger


def validate_treasury_balance(
    name: str,
    balance: Decimal,
    logger: Logger,
) -> None:
    """Warn when a treasury account holds a negative balance.

    Args:
        name: Treasury account name.
        balance: Raw balance amount.
        logger: Logger used for warnings.
    """
    if balance < 0:
        logger.warning(
            f"Treasury balance is negative for account={name}: {balance}"
        )


def validate_kind(
    kind: str | None,
    allowed: Iterable[str],
    entity: str,
    logger: Logger,
) -> None:
    """Warn when a type value falls outside the known set.

    Args:
        kind: Normalized type value.
        allowed: Accepted type values.
        entity: Entity description used in the warning.
        logger: Logger used for warnings.
    """
    if kind not in tuple(allowed):
        logger.warning(f"Unknown {entity} type: {kind!r}")


__all__ = ["validate_treasury_balance", "validate_kind"]
