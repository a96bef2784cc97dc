"""Version conflict handling modes.

The resolution engine reads the mode; the strategy only stores it.
"""

from __future__ import annotations

from enum import Enum


class ConflictMode(str, Enum):
    LATEST = "latest"
    STRICT = "strict"


class ConflictResolution:
    """Base policy value."""

    mode: ConflictMode

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ConflictResolution) and other.mode == self.mode

    def __hash__(self) -> int:
        return hash(self.mode)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class LatestConflictResolution(ConflictResolution):
    """Highest requested version wins."""

    mode = ConflictMode.LATEST


class StrictConflictResolution(ConflictResolution):
    """Any version conflict fails resolution."""

    mode = ConflictMode.STRICT
