"""Use case to list treasury (cash and bank) balances."""

from factory_balance.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from factory_balance.application.use_cases.constants import TREASURY_SOURCE
from factory_balance.domain.errors import SourceUnavailableError
from factory_balance.domain.models import TreasuryAccountBreakdown
from factory_balance.domain.services.ledgers import build_treasury_breakdown
from factory_balance.infrastructure.logging.logger import get_app_logger


class GetTreasuryBalancesUseCase:
    """Fetch every treasury account with its balance."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing read access to the store.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> list[TreasuryAccountBreakdown]:
        """Return treasury accounts sorted by descending balance.

        Raises:
            SourceUnavailableError: The treasury accounts could not be read.
        """
        try:
            rows = self._ledger_repository.fetch_treasury_accounts()
        except Exception as exc:
            raise SourceUnavailableError(
                TREASURY_SOURCE,
                f"Could not read treasury accounts: {exc}",
            ) from exc
        accounts = build_treasury_breakdown(rows, self._logger)
        self._logger.info(f"Fetched {len(accounts)} treasury accounts")
        return accounts


__all__ = ["GetTreasuryBalancesUseCase", "TreasuryAccountBreakdown"]
