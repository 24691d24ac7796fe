"""Inbound adapters for the probe.

Inbound adapters check incoming requests before they are turned into
domain operations.

Exports:
    - ReadOnlyQueryValidator: Rejects anything but a single SELECT
"""

from sqlite_probe.adapters.inbound.query_validator import ReadOnlyQueryValidator

__all__ = [
    "ReadOnlyQueryValidator",
]
