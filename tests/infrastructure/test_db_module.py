"""Tests for the infrastructure.db module."""

import threading
import time

import pytest

from factory_balance.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("FACTORY_DB_URL", "postgresql://example")

    assert db_module._get_env_var("FACTORY_DB_URL") == "postgresql://example"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("FACTORY_DB_URL", raising=False)

    with pytest.raises(RuntimeError):
        db_module._get_env_var("FACTORY_DB_URL")


def test_create_engine_passes_pool_configuration(monkeypatch):
    """_create_engine should configure QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://factory")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://factory"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True


def test_get_store_engine_caches_engine(monkeypatch):
    """get_store_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_store_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("FACTORY_DB_URL", "postgresql://factory")

    engine_one = db_module.get_store_engine()
    engine_two = db_module.get_store_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:postgresql://factory"
    assert created == ["postgresql://factory"]


def test_get_store_engine_builds_once_under_concurrent_first_use(monkeypatch):
    """Threads racing on the first call should share a single engine."""
    monkeypatch.setattr(db_module, "_store_engine", None)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("FACTORY_DB_URL", "postgresql://factory")
    created = []

    def slow_create_engine(url):
        time.sleep(0.05)
        engine = object()
        created.append(engine)
        return engine

    monkeypatch.setattr(db_module, "_create_engine", slow_create_engine)
    thread_count = 6
    barrier = threading.Barrier(thread_count, timeout=5)
    engines = []
    engines_lock = threading.Lock()

    def first_use():
        barrier.wait()
        engine = db_module.get_store_engine()
        with engines_lock:
            engines.append(engine)

    threads = [threading.Thread(target=first_use) for _ in range(thread_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert len(created) == 1
    assert len(engines) == thread_count
    assert all(engine is created[0] for engine in engines)


def test_adapter_returns_underlying_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the global helper."""
    monkeypatch.setattr(db_module, "get_store_engine", lambda: "store_engine")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_store_engine() == "store_engine"
