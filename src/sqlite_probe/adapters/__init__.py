"""Adapters layer - concrete implementations of ports."""

from sqlite_probe.adapters.inbound import ReadOnlyQueryValidator
from sqlite_probe.adapters.outbound import SQLiteDriver

__all__ = [
    "ReadOnlyQueryValidator",
    "SQLiteDriver",
]
