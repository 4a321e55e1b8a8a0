"""Composition root for wiring infrastructure adapters."""

from factory_balance.application.ports.database import DatabaseEnginePort
from factory_balance.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from factory_balance.application.use_cases.get_balance_sheet import (
    GetBalanceSheetUseCase,
)
from factory_balance.application.use_cases.get_balance_sheet_insights import (
    GetBalanceSheetInsightsUseCase,
)
from factory_balance.application.use_cases.get_quick_summary import (
    GetQuickSummaryUseCase,
)
from factory_balance.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from factory_balance.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from factory_balance.infrastructure.logging.logger import get_app_logger
from factory_balance.infrastructure.settings import BalanceSheetSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger repository for balance-sheet reads."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_balance_sheet_use_case(
    repository: LedgerRepositoryPort | None = None,
    settings: BalanceSheetSettings | None = None,
) -> GetBalanceSheetUseCase:
    """Return the balance sheet composer wired from configuration."""
    resolved_settings = settings or BalanceSheetSettings.from_env()
    return GetBalanceSheetUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
        inventory_failure_policy=resolved_settings.inventory_failure_policy,
        max_workers=resolved_settings.max_workers,
    )


def build_quick_summary_use_case(
    repository: LedgerRepositoryPort | None = None,
    settings: BalanceSheetSettings | None = None,
    balance_sheet: GetBalanceSheetUseCase | None = None,
) -> GetQuickSummaryUseCase:
    """Return the quick summary projector.

    An existing composer is reused when given; otherwise one is built from
    ``repository`` and ``settings``.
    """
    return GetQuickSummaryUseCase(
        balance_sheet or build_balance_sheet_use_case(repository, settings)
    )


def build_insights_use_case(
    repository: LedgerRepositoryPort | None = None,
    settings: BalanceSheetSettings | None = None,
    balance_sheet: GetBalanceSheetUseCase | None = None,
) -> GetBalanceSheetInsightsUseCase:
    """Return the balance sheet reading use case."""
    return GetBalanceSheetInsightsUseCase(
        balance_sheet or build_balance_sheet_use_case(repository, settings)
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_balance_sheet_use_case",
    "build_quick_summary_use_case",
    "build_insights_use_case",
]
