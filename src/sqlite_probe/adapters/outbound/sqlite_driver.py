"""SQLite Database Driver implementation.

This adapter implements the DatabaseDriver protocol using the standard
library ``sqlite3`` module. Read-only connections additionally enable
``PRAGMA query_only`` so the engine itself rejects writes.
"""

from __future__ import annotations

import sqlite3

from sqlite_probe.domain.value_objects import ConnectionSpec
from sqlite_probe.infrastructure.logging import get_logger
from sqlite_probe.ports.outbound import ConnectionFailure


class SQLiteDriver:
    """sqlite3-backed implementation of the DatabaseDriver protocol."""

    def __init__(self) -> None:
        self._logger = get_logger(__name__)

    @property
    def engine_name(self) -> str:
        return "sqlite"

    @property
    def library_version(self) -> str:
        """Version of the SQLite library the interpreter is linked against."""
        return sqlite3.sqlite_version

    def connect(self, spec: ConnectionSpec) -> sqlite3.Connection:
        """Open a SQLite connection.

        Args:
            spec: Database location and open mode.

        Returns:
            An open sqlite3 connection owned by the caller.

        Raises:
            ConnectionFailure: If SQLite cannot open the database or the
                read-only pragma cannot be applied.
        """
        try:
            conn = sqlite3.connect(spec.database, uri=spec.uri)
        except sqlite3.Error as e:
            raise ConnectionFailure(
                f"failed to open sqlite database {spec.database!r}: {e}"
            ) from e

        if spec.read_only:
            try:
                conn.execute("PRAGMA query_only=ON")
            except sqlite3.Error as e:
                conn.close()
                raise ConnectionFailure(
                    f"failed to enable query_only on {spec.database!r}: {e}"
                ) from e

        self._logger.debug(
            "sqlite_connection_opened",
            database=spec.database,
            read_only=spec.read_only,
            in_memory=spec.is_in_memory,
        )
        return conn
