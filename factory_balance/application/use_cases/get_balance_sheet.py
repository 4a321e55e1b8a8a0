"""Use case to compose the consolidated balance sheet."""

from collections.abc import Callable
from datetime import datetime, timezone

from factory_balance.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from factory_balance.application.use_cases.constants import (
    DEFAULT_MAX_WORKERS,
    INVENTORY_POLICY_DEGRADE,
)
from factory_balance.application.use_cases.fan_out import run_concurrently
from factory_balance.application.use_cases.get_inventory_valuation import (
    GetInventoryValuationUseCase,
)
from factory_balance.application.use_cases.get_parties_balances import (
    GetPartiesBalancesUseCase,
)
from factory_balance.application.use_cases.get_treasury_balances import (
    GetTreasuryBalancesUseCase,
)
from factory_balance.domain.models import BalanceSheetSnapshot
from factory_balance.domain.services.balance_sheet import compose_balance_sheet
from factory_balance.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GetBalanceSheetUseCase:
    """Compose the balance sheet from inventory, treasury and parties.

    The three ledgers are read concurrently. Treasury and counterparty
    failures abort the report; inventory failures follow the configured
    policy. The composition itself is pure and runs once every read has
    completed.
    """

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        inventory_failure_policy: str = INVENTORY_POLICY_DEGRADE,
        max_workers: int = DEFAULT_MAX_WORKERS,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing read access to the store.
            logger: Optional logger compatible with logging.Logger-like API.
            inventory_failure_policy: ``degrade`` or ``strict``.
            max_workers: Thread pool size for the inventory category reads.
                The three ledger reads always run on their own pool.
            clock: Optional callable returning the generation timestamp.
        """
        self._logger = logger or get_app_logger()
        self._clock = clock or _utc_now
        self._inventory = GetInventoryValuationUseCase(
            ledger_repository,
            logger=self._logger,
            failure_policy=inventory_failure_policy,
            max_workers=max_workers,
        )
        self._treasury = GetTreasuryBalancesUseCase(
            ledger_repository,
            logger=self._logger,
        )
        self._parties = GetPartiesBalancesUseCase(
            ledger_repository,
            logger=self._logger,
        )

    def execute(self) -> BalanceSheetSnapshot:
        """Return a freshly computed balance sheet snapshot.

        Returns:
            BalanceSheetSnapshot: Assets, liabilities, net position,
            coverage ratio, breakdowns and rankings.

        Raises:
            SourceUnavailableError: A fatal source could not be read.
        """
        tasks = {
            "inventory": self._inventory.execute,
            "treasury": self._treasury.execute,
            "parties": self._parties.execute,
        }
        # The three ledgers always overlap; max_workers sizes the
        # inventory category fan-out only.
        results = run_concurrently(tasks, len(tasks))
        snapshot = compose_balance_sheet(
            results["inventory"],
            results["treasury"],
            results["parties"],
            generated_at=self._clock(),
        )
        self._logger.info(
            f"Balance sheet computed: assets={snapshot.assets.total}, "
            f"liabilities={snapshot.liabilities.total}, "
            f"net_position={snapshot.net_position}, "
            f"coverage={snapshot.coverage_ratio}%"
        )
        return snapshot


__all__ = ["GetBalanceSheetUseCase", "BalanceSheetSnapshot"]
