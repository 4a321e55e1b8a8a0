"""Use case to list customer and supplier running balances."""

from factory_balance.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from factory_balance.application.use_cases.constants import COUNTERPARTY_SOURCE
from factory_balance.domain.errors import SourceUnavailableError
from factory_balance.domain.models import CounterpartyBalance
from factory_balance.domain.services.ledgers import build_counterparty_balances
from factory_balance.infrastructure.logging.logger import get_app_logger


class GetPartiesBalancesUseCase:
    """Fetch customers and suppliers holding a non-zero balance."""

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

    def execute(self) -> list[CounterpartyBalance]:
        """Return non-zero counterparty balances, largest first.

        Raises:
            SourceUnavailableError: The counterparties could not be read.
        """
        try:
            rows = self._ledger_repository.fetch_nonzero_counterparties()
        except Exception as exc:
            raise SourceUnavailableError(
                COUNTERPARTY_SOURCE,
                f"Could not read counterparty balances: {exc}",
            ) from exc
        balances = build_counterparty_balances(rows, self._logger)
        self._logger.info(f"Fetched {len(balances)} counterparty balances")
        return balances


__all__ = ["GetPartiesBalancesUseCase", "CounterpartyBalance"]
