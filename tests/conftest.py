"""Pytest configuration and fixtures for sqlite_probe tests."""

from __future__ import annotations

import sqlite3
from typing import Generator

import pytest
import structlog
from prometheus_client import CollectorRegistry

from sqlite_probe.domain.value_objects import ConnectionSpec
from sqlite_probe.infrastructure.config import Config
from sqlite_probe.infrastructure.metrics import MetricsRegistry
from sqlite_probe.ports.outbound import ConnectionFailure


class SpyConnection:
    """Wraps a sqlite3 connection and records how it is used."""

    def __init__(self, inner: sqlite3.Connection, empty_results: bool = False) -> None:
        self.inner = inner
        self.empty_results = empty_results
        self.executed: list[str] = []
        self.close_calls = 0

    def execute(self, sql: str) -> sqlite3.Cursor:
        self.executed.append(sql)
        if self.empty_results:
            return self.inner.execute(f"select * from ({sql}) where 0")
        return self.inner.execute(sql)

    def close(self) -> None:
        self.close_calls += 1
        self.inner.close()


class SpyDriver:
    """DatabaseDriver that hands out SpyConnections over in-memory SQLite."""

    engine_name = "sqlite"

    def __init__(self, fail_with: str | None = None, empty_results: bool = False) -> None:
        self.fail_with = fail_with
        self.empty_results = empty_results
        self.connect_calls: list[ConnectionSpec] = []
        self.connections: list[SpyConnection] = []

    def connect(self, spec: ConnectionSpec) -> SpyConnection:
        self.connect_calls.append(spec)
        if self.fail_with is not None:
            raise ConnectionFailure(self.fail_with)
        conn = SpyConnection(sqlite3.connect(":memory:"), self.empty_results)
        self.connections.append(conn)
        return conn


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def spy_driver() -> SpyDriver:
    return SpyDriver()


@pytest.fixture
def failing_driver() -> SpyDriver:
    return SpyDriver(fail_with="unable to open database file")


@pytest.fixture
def test_config() -> Config:
    """Provide the default configuration, independent of the environment."""
    return Config(_env_prefix="SQLITE_PROBE_TEST_UNUSED_")


@pytest.fixture
def empty_result_driver() -> SpyDriver:
    return SpyDriver(empty_results=True)


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
