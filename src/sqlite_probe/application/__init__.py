"""Application layer for the probe.

Exports:
    - DatabaseProbe: Opens a connection, reads one scalar, logs it
    - VERSION_QUERY: The engine version query the entry point runs
"""

from sqlite_probe.application.probe import VERSION_QUERY, DatabaseProbe

__all__ = [
    "DatabaseProbe",
    "VERSION_QUERY",
]
