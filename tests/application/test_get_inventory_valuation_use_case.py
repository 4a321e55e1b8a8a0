"""Tests for the GetInventoryValuationUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from factory_balance.application.use_cases.get_inventory_valuation import (
    GetInventoryValuationUseCase,
)
from factory_balance.domain.errors import SourceUnavailableError
from factory_balance.domain.models import InventoryRecordRow


def _build_repository(records: dict[str, list[InventoryRecordRow]]):
    repository = MagicMock()

    def _fetch(category: str) -> list[InventoryRecordRow]:
        outcome = records[category]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    repository.fetch_inventory_records.side_effect = _fetch
    return repository


def test_execute_returns_four_categories_in_fixed_order() -> None:
    """Use case should value every category even when empty."""
    repository = _build_repository(
        {
            "finished": [InventoryRecordRow(1, Decimal("2"), Decimal("7"))],
            "semi": [],
            "packaging": [],
            "raw": [
                InventoryRecordRow(2, Decimal("3"), Decimal("1.5")),
                InventoryRecordRow(3, Decimal("1"), None),
            ],
        }
    )

    result = GetInventoryValuationUseCase(
        repository,
        logger=MagicMock(),
    ).execute()

    assert [item.category for item in result] == [
        "raw",
        "packaging",
        "semi",
        "finished",
    ]
    assert [item.count for item in result] == [2, 0, 0, 1]
    assert result[0].value == Decimal("4.5")
    assert result[3].value == Decimal("14")
    assert result[1].label == "Packaging materials"
    assert repository.fetch_inventory_records.call_count == 4


def test_execute_isolates_failing_category() -> None:
    """A failing category should not affect the others by default."""
    repository = _build_repository(
        {
            "raw": [InventoryRecordRow(1, Decimal("1"), Decimal("1"))],
            "packaging": ConnectionError("timeout"),
            "semi": [],
            "finished": [],
        }
    )
    logger = MagicMock()

    result = GetInventoryValuationUseCase(repository, logger=logger).execute()

    assert result[1].count == 0
    assert result[1].value == Decimal("0")
    assert result[0].value == Decimal("1")
    logger.warning.assert_called_once()


def test_execute_strict_policy_raises() -> None:
    """Strict policy should surface the failing category."""
    repository = _build_repository(
        {
            "raw": [],
            "packaging": [],
            "semi": ConnectionError("timeout"),
            "finished": [],
        }
    )

    use_case = GetInventoryValuationUseCase(
        repository,
        logger=MagicMock(),
        failure_policy="strict",
    )

    with pytest.raises(SourceUnavailableError) as excinfo:
        use_case.execute()

    assert excinfo.value.source == "semi_finished_products"


def test_unknown_policy_is_rejected() -> None:
    """Only degrade and strict policies are accepted."""
    with pytest.raises(ValueError):
        GetInventoryValuationUseCase(
            MagicMock(),
            logger=MagicMock(),
            failure_policy="retry",
        )
