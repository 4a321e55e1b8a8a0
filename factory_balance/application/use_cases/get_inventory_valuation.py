"""Use case to value the stock held in each inventory category."""

from functools import partial

from factory_balance.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from factory_balance.application.use_cases.constants import (
    DEFAULT_MAX_WORKERS,
    INVENTORY_FAILURE_POLICIES,
    INVENTORY_POLICY_DEGRADE,
    INVENTORY_POLICY_STRICT,
)
from factory_balance.application.use_cases.fan_out import run_concurrently
from factory_balance.domain.constants import INVENTORY_CATEGORIES
from factory_balance.domain.errors import SourceUnavailableError
from factory_balance.domain.models import InventoryCategoryBreakdown
from factory_balance.domain.services.ledgers import (
    empty_inventory_category,
    value_inventory_category,
)
from factory_balance.infrastructure.logging.logger import get_app_logger


class GetInventoryValuationUseCase:
    """Compute count and value for the four inventory categories."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        failure_policy: str = INVENTORY_POLICY_DEGRADE,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing read access to the store.
            logger: Optional logger compatible with logging.Logger-like API.
            failure_policy: ``degrade`` reports an unreadable category as
                empty; ``strict`` fails the whole valuation.
            max_workers: Thread pool size for the category reads.
        """
        if failure_policy not in INVENTORY_FAILURE_POLICIES:
            raise ValueError(
                "Unsupported inventory failure policy: "
                f"{failure_policy}. Expected degrade or strict."
            )
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._failure_policy = failure_policy
        self._max_workers = max_workers

    def execute(self) -> list[InventoryCategoryBreakdown]:
        """Return one breakdown per category in fixed order.

        Returns:
            list[InventoryCategoryBreakdown]: Raw, packaging, semi-finished
            and finished goods, always four entries.

        Raises:
            SourceUnavailableError: A category could not be read under the
                strict policy.
        """
        tasks = {
            category: partial(self._value_category, category, label, table)
            for category, label, table in INVENTORY_CATEGORIES
        }
        results = run_concurrently(tasks, self._max_workers)
        breakdown = [results[category] for category, _, _ in INVENTORY_CATEGORIES]
        self._logger.info(
            "Inventory valued: "
            + ", ".join(f"{item.category}={item.value}" for item in breakdown)
        )
        return breakdown

    def _value_category(
        self,
        category: str,
        label: str,
        table: str,
    ) -> InventoryCategoryBreakdown:
        try:
            records = self._ledger_repository.fetch_inventory_records(category)
        except Exception as exc:
            if self._failure_policy == INVENTORY_POLICY_STRICT:
                raise SourceUnavailableError(
                    table,
                    f"Could not read inventory category {category}: {exc}",
                ) from exc
            self._logger.warning(
                f"Inventory category {category} unreadable, "
                f"reported as empty: {exc}"
            )
            return empty_inventory_category(category, label)
        return value_inventory_category(category, label, records)


__all__ = ["GetInventoryValuationUseCase", "InventoryCategoryBreakdown"]
