"""Tests for the check_store_connection adapter."""

from factory_balance.adapters import check_store_connection


class _DummyConnection:
    def __init__(self) -> None:
        self.executed: list[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def exec_driver_sql(self, statement: str) -> None:
        self.executed.append(statement)


class _DummyEngine:
    def __init__(self, url: str) -> None:
        self.url = url
        self.connection = _DummyConnection()

    def connect(self):
        return self.connection


def test_main_logs_successful_check(monkeypatch):
    """The CLI should log the store URL and execute SELECT 1."""
    store_engine = _DummyEngine("postgresql://factory")

    class _Adapter:
        def get_store_engine(self):
            return store_engine

    log_messages: list[str] = []

    class _Logger:
        def info(self, msg: str) -> None:
            log_messages.append(msg)

    monkeypatch.setattr(
        check_store_connection,
        "build_database_adapter",
        lambda: _Adapter(),
    )
    monkeypatch.setattr(
        check_store_connection,
        "get_app_logger",
        lambda: _Logger(),
    )

    check_store_connection.main()

    assert "postgresql://factory" in log_messages[0]
    assert log_messages[1] == "Store connection is working."
    assert store_engine.connection.executed == ["SELECT 1"]
