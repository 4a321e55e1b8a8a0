"""Tests for the GetPartiesBalancesUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from factory_balance.application.use_cases.get_parties_balances import (
    GetPartiesBalancesUseCase,
)
from factory_balance.domain.errors import SourceUnavailableError
from factory_balance.domain.models import CounterpartyRow


def test_execute_returns_nonzero_balances_sorted() -> None:
    """Use case should drop zero balances and sort the rest."""
    repository = MagicMock()
    repository.fetch_nonzero_counterparties.return_value = [
        CounterpartyRow("s1", "Supplier", "supplier", Decimal("-90")),
        CounterpartyRow("c1", "Customer", "customer", Decimal("120"), "555"),
        CounterpartyRow("c2", "Settled", "customer", Decimal("0")),
    ]

    result = GetPartiesBalancesUseCase(
        repository,
        logger=MagicMock(),
    ).execute()

    assert [party.party_id for party in result] == ["c1", "s1"]
    assert result[0].phone == "555"


def test_execute_wraps_read_failures() -> None:
    """Read failures should surface as SourceUnavailableError."""
    repository = MagicMock()
    repository.fetch_nonzero_counterparties.side_effect = TimeoutError()

    with pytest.raises(SourceUnavailableError) as excinfo:
        GetPartiesBalancesUseCase(repository, logger=MagicMock()).execute()

    assert excinfo.value.source == "parties"
    assert isinstance(excinfo.value.__cause__, TimeoutError)
