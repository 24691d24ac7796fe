"""Outbound ports - interfaces for external dependencies.

Outbound ports define contracts for the database engine the probe
talks to.
"""

from sqlite_probe.ports.outbound.database_driver import (
    Connection,
    ConnectionFailure,
    Cursor,
    DatabaseDriver,
    ProbeError,
    QueryFailure,
)

__all__ = [
    "Connection",
    "ConnectionFailure",
    "Cursor",
    "DatabaseDriver",
    "ProbeError",
    "QueryFailure",
]
