"""Database Probe - open, query one scalar, report, close.

The probe demonstrates that a database driver can be opened and queried.
Its control path is linear and every failure is fatal:

    open -> query_scalar -> report -> close

Usage:
    from sqlite_probe.adapters.outbound import SQLiteDriver
    from sqlite_probe.application import DatabaseProbe
    from sqlite_probe.domain.value_objects import ConnectionSpec

    probe = DatabaseProbe(SQLiteDriver(), ConnectionSpec.in_memory())
    version = probe.run("select sqlite_version()")
"""

from __future__ import annotations

import math
import time
from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Iterator

from sqlite_probe import __version__
from sqlite_probe.adapters.inbound import ReadOnlyQueryValidator
from sqlite_probe.domain.value_objects import ConnectionSpec, VersionString
from sqlite_probe.infrastructure.logging import get_logger
from sqlite_probe.infrastructure.metrics import MetricsRegistry, get_metrics
from sqlite_probe.infrastructure.tracing import trace_span
from sqlite_probe.ports.outbound import (
    Connection,
    ConnectionFailure,
    DatabaseDriver,
    QueryFailure,
)

VERSION_QUERY = "select sqlite_version()"


class DatabaseProbe:
    """Opens a connection, reads one scalar value, and logs it.

    The probe owns its connection exclusively for the duration of
    ``session()``; the connection is closed exactly once on every exit
    path, including query failures.

    Thread Safety:
        Not thread-safe. One probe run per thread.
    """

    def __init__(
        self,
        driver: DatabaseDriver,
        spec: ConnectionSpec | None = None,
        metrics: MetricsRegistry | None = None,
        validator: ReadOnlyQueryValidator | None = None,
    ) -> None:
        """Initialize the probe.

        Args:
            driver: Driver used to open connections.
            spec: Connection spec (in-memory database if None).
            metrics: Metrics registry (global registry if None).
            validator: Read-only query validator (sqlite dialect if None).
        """
        self._driver = driver
        self._spec = spec or ConnectionSpec.in_memory()
        self._metrics = metrics or get_metrics()
        self._validator = validator or ReadOnlyQueryValidator()
        self._logger = get_logger(__name__, engine=driver.engine_name)

    @property
    def spec(self) -> ConnectionSpec:
        return self._spec

    def open(self) -> Connection:
        """Establish a connection described by the probe's spec.

        Raises:
            ConnectionFailure: If the connection cannot be established.
        """
        with trace_span(
            "probe.open",
            {"db.system": self._driver.engine_name, "db.name": self._spec.database},
        ):
            conn = self._driver.connect(self._spec)

        self._metrics.connections_opened_total.labels(engine=self._driver.engine_name).inc()
        self._logger.debug("probe_connection_opened", database=self._spec.database)
        return conn

    def query_scalar(self, conn: Connection, sql: str) -> VersionString:
        """Run a one-row, one-column query and return the value as text.

        Args:
            conn: Open connection owned by this probe.
            sql: A single read-only SELECT.

        Returns:
            The first row's only column, decoded as text.

        Raises:
            QueryFailure: If the query is not read-only, fails to execute,
                returns no rows, does not return exactly one column, or
                returns a value that cannot be decoded as non-empty text.
        """
        self._validator.validate(sql)

        with trace_span(
            "probe.query",
            {"db.system": self._driver.engine_name, "db.statement": sql},
        ):
            start = time.perf_counter()
            try:
                cursor = conn.execute(sql)
                row = cursor.fetchone()
            except Exception as e:
                raise QueryFailure(f"failed to query: {e}") from e
            finally:
                self._metrics.query_latency_seconds.labels(
                    engine=self._driver.engine_name
                ).observe(time.perf_counter() - start)

        if row is None:
            raise QueryFailure("failed to query: no rows in result set")

        if len(row) != 1:
            raise QueryFailure(
                f"failed to query: expected 1 column, got {len(row)}"
            )

        text = _decode_text(row[0])
        try:
            return VersionString(text)
        except ValueError as e:
            raise QueryFailure(f"failed to query: {e}") from e

    def report(self, value: VersionString | str) -> None:
        """Write the retrieved value to the operator log."""
        self._logger.info("sqlite_version", version=str(value))
        self._metrics.info.info({"version": __version__, "engine_version": str(value)})

    def close(self, conn: Connection) -> None:
        """Release the connection."""
        conn.close()
        self._metrics.connections_closed_total.labels(engine=self._driver.engine_name).inc()
        self._logger.debug("probe_connection_closed", database=self._spec.database)

    @contextmanager
    def session(self) -> Iterator[Connection]:
        """Open a connection and close it when the block exits.

        Nothing is closed if ``open`` itself fails.
        """
        conn = self.open()
        try:
            yield conn
        finally:
            self.close(conn)

    def run(self, sql: str) -> VersionString:
        """Open, query, report, and close.

        Raises:
            ConnectionFailure: If the connection cannot be established.
            QueryFailure: If the query fails; the connection is still closed.
        """
        try:
            with self.session() as conn:
                value = self.query_scalar(conn, sql)
                self.report(value)
        except ConnectionFailure:
            self._metrics.runs_total.labels(outcome="connection_failure").inc()
            raise
        except QueryFailure:
            self._metrics.runs_total.labels(outcome="query_failure").inc()
            raise

        self._metrics.runs_total.labels(outcome="success").inc()
        return value


def _decode_text(value: Any) -> str:
    """Decode a scanned column value as text.

    Strings pass through, bytes must be UTF-8, integers are rendered with
    ``str()`` and floats with ``_format_float``. NULL and other types cannot
    be decoded.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise QueryFailure(f"failed to query: column is not valid UTF-8 text: {e}") from e
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, int):
        return str(value)
    if value is None:
        raise QueryFailure("failed to query: cannot decode NULL column as text")
    raise QueryFailure(
        f"failed to query: cannot decode {type(value).__name__} column as text"
    )


def _format_float(value: float) -> str:
    """Render a float as the shortest text that round-trips.

    Plain notation is used for decimal exponents in [-4, 6) and scientific
    notation with an at least two-digit exponent otherwise, so
    ``100000.0`` becomes ``"100000"`` and ``123456789.0`` becomes
    ``"1.23456789e+08"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    neg = "-" if sign else ""
    digits = "".join(str(d) for d in digit_tuple)
    if digits == "0":
        return neg + "0"

    point = len(digits) + exponent  # position of the decimal point
    exp10 = point - 1
    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        return f"{neg}{mantissa}e{'-' if exp10 < 0 else '+'}{abs(exp10):02d}"
    if point <= 0:
        return f"{neg}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return neg + digits + "0" * (point - len(digits))
    return f"{neg}{digits[:point]}.{digits[point:]}"
