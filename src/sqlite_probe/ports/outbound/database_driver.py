"""Database Driver port for opening and querying a database engine.

This outbound port defines the contract the probe relies on to reach a
database engine. Implementations wrap a concrete DB-API driver.

The driver is responsible for:
- Opening a connection described by a ConnectionSpec
- Translating driver-specific open errors into ConnectionFailure
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Protocol, Sequence

from sqlite_probe.domain.value_objects import ConnectionSpec


class Cursor(Protocol):
    """Subset of a DB-API cursor used by the probe."""

    def fetchone(self) -> Sequence[Any] | None: ...


class Connection(Protocol):
    """Subset of a DB-API connection used by the probe.

    A connection is owned by exactly one probe run and must be closed
    exactly once.
    """

    @abstractmethod
    def execute(self, sql: str) -> Cursor:
        """Execute a single statement and return a cursor over its rows."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release the connection and any resources it holds."""
        ...


class DatabaseDriver(Protocol):
    """Protocol for opening connections to a database engine."""

    @property
    @abstractmethod
    def engine_name(self) -> str:
        """Short engine name used in logs and metrics (e.g. ``"sqlite"``)."""
        ...

    @abstractmethod
    def connect(self, spec: ConnectionSpec) -> Connection:
        """Open a connection.

        Args:
            spec: Where and how to open the database.

        Returns:
            An open connection owned by the caller.

        Raises:
            ConnectionFailure: If the connection cannot be established.
        """
        ...


class ProbeError(Exception):
    """Base error for probe failures."""

    pass


class ConnectionFailure(ProbeError):
    """The database connection could not be established."""

    pass


class QueryFailure(ProbeError):
    """Query validation, execution, or result decoding failed."""

    pass
