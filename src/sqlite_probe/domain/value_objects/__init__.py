"""Value objects for the probe domain.

Value objects are immutable types that represent domain concepts.

Exports:
    - VersionString: Engine version text retrieved by the probe
    - ConnectionSpec: Database location and open mode
    - IN_MEMORY_DATABASE: Database name for an ephemeral in-memory instance
"""

from sqlite_probe.domain.value_objects.connection_spec import (
    IN_MEMORY_DATABASE,
    ConnectionSpec,
)
from sqlite_probe.domain.value_objects.version import (
    SEMANTIC_VERSION_PATTERN,
    VersionString,
)

__all__ = [
    "ConnectionSpec",
    "IN_MEMORY_DATABASE",
    "SEMANTIC_VERSION_PATTERN",
    "VersionString",
]
