"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts:
- Outbound ports: Dependencies on external systems (e.g., DatabaseDriver)

Adapters implement these ports with concrete functionality.
"""

from sqlite_probe.ports.outbound import (
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
