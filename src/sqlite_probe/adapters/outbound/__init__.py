"""Outbound adapters - implementations of outbound ports.

These adapters implement external dependencies such as the database
engine driver.
"""

from sqlite_probe.adapters.outbound.sqlite_driver import SQLiteDriver

__all__ = [
    "SQLiteDriver",
]
