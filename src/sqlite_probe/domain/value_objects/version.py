"""Engine version value object.

The probe retrieves a single text value from the database engine. It lives
only for the lifetime of the process and is never persisted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# MAJOR.MINOR.PATCH with optional further numeric parts (SQLite has used
# four-part versions such as 3.7.17.1 in the past).
SEMANTIC_VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+(?:\.\d+)*$")


@dataclass(frozen=True, slots=True)
class VersionString:
    """Version string reported by a database engine.

    Attributes:
        value: Raw text as returned by the engine, e.g. ``"3.41.2"``.

    Example:
        >>> v = VersionString("3.41.2")
        >>> v.is_semantic
        True
        >>> v.components
        (3, 41, 2)
    """

    value: str

    def __post_init__(self) -> None:
        """Validate the version string."""
        if not self.value:
            raise ValueError("version string must be non-empty")

    def __str__(self) -> str:
        return self.value

    @property
    def is_semantic(self) -> bool:
        """True if the value is shaped like a semantic version."""
        return SEMANTIC_VERSION_PATTERN.match(self.value) is not None

    @property
    def components(self) -> tuple[int, ...]:
        """Numeric components of a semantic version.

        Raises:
            ValueError: If the value is not semantic-version shaped.
        """
        if not self.is_semantic:
            raise ValueError(f"not a semantic version: {self.value!r}")
        return tuple(int(part) for part in self.value.split("."))
