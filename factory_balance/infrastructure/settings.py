"""Settings helpers for the balance-sheet engine."""

from dataclasses import dataclass
import os

import dotenv

from factory_balance.application.use_cases.constants import (
    DEFAULT_MAX_WORKERS,
    INVENTORY_FAILURE_POLICIES,
    INVENTORY_POLICY_DEGRADE,
)
from factory_balance.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BalanceSheetSettings:
    """Settings for report computation.

    Attributes:
        inventory_failure_policy: ``degrade`` reports an unreadable
            inventory category as empty, ``strict`` fails the report.
        max_workers: Thread pool size for the inventory category reads.
            The treasury, counterparty and inventory reads always overlap.
    """

    inventory_failure_policy: str = INVENTORY_POLICY_DEGRADE
    max_workers: int = DEFAULT_MAX_WORKERS

    @classmethod
    def from_env(cls) -> "BalanceSheetSettings":
        """Build settings from environment variables.

        Returns:
            BalanceSheetSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If INVENTORY_FAILURE_POLICY holds an unknown value.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        policy = (
            os.getenv("INVENTORY_FAILURE_POLICY", INVENTORY_POLICY_DEGRADE)
            .strip()
            .lower()
        )
        if policy not in INVENTORY_FAILURE_POLICIES:
            raise ValueError(
                f"Unsupported INVENTORY_FAILURE_POLICY: {policy}. "
                "Expected degrade or strict."
            )
        max_workers = cls._parse_workers(
            os.getenv("BALANCE_SHEET_MAX_WORKERS"),
            logger=logger,
        )
        return cls(inventory_failure_policy=policy, max_workers=max_workers)

    @staticmethod
    def _parse_workers(raw_value: str | None, logger) -> int:
        """Parse the worker count, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Positive worker count.
        """
        if not raw_value:
            return DEFAULT_MAX_WORKERS
        try:
            workers = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid BALANCE_SHEET_MAX_WORKERS '{raw_value}'. "
                f"Using {DEFAULT_MAX_WORKERS}."
            )
            return DEFAULT_MAX_WORKERS
        if workers < 1:
            logger.warning(
                f"BALANCE_SHEET_MAX_WORKERS must be positive, got {workers}. "
                f"Using {DEFAULT_MAX_WORKERS}."
            )
            return DEFAULT_MAX_WORKERS
        return workers


__all__ = ["BalanceSheetSettings"]
