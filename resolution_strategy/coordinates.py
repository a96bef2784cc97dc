"""Module coordinates and notation parsing.

A coordinate is the ``(group, name, version)`` triple identifying a
dependency target. Notations accepted by ``parse_coordinate``:

- ``"group:name:version"`` text
- a mapping with ``group``, ``name`` and ``version`` keys (extra keys ignored)
- an existing ``ModuleCoordinate``
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class ModuleCoordinate:
    """Immutable ``(group, name, version)`` value."""

    group: str
    name: str
    version: str

    @property
    def module_id(self) -> str:
        """The ``group:name`` part, used for matching."""
        return f"{self.group}:{self.name}"

    def matches_module(self, other: ModuleCoordinate) -> bool:
        return self.group == other.group and self.name == other.name

    def with_version(self, version: str) -> ModuleCoordinate:
        return ModuleCoordinate(self.group, self.name, version)

    def __str__(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"


def parse_coordinate(notation: Any) -> ModuleCoordinate:
    """Parse a coordinate notation into a ModuleCoordinate.

    Raises:
        InvalidArgumentError: Notation is not a recognised form or has empty parts
    """
    if isinstance(notation, ModuleCoordinate):
        return notation

    if isinstance(notation, Mapping):
        missing = [key for key in ("group", "name", "version") if not notation.get(key)]
        if missing:
            raise InvalidArgumentError(
                f"Invalid module notation {dict(notation)!r}: missing {', '.join(missing)}"
            )
        return ModuleCoordinate(str(notation["group"]), str(notation["name"]), str(notation["version"]))

    if isinstance(notation, str):
        parts = [part.strip() for part in notation.split(":")]
        if len(parts) != 3 or not all(parts):
            raise InvalidArgumentError(
                f"Invalid module notation '{notation}': expected 'group:name:version'"
            )
        return ModuleCoordinate(*parts)

    raise InvalidArgumentError(f"Cannot convert {type(notation).__name__} to a module coordinate: {notation!r}")


def parse_module_id(notation: str) -> tuple[str, str]:
    """Parse ``group:name`` into its two parts.

    Raises:
        InvalidArgumentError: Not exactly two non-empty parts
    """
    parts = [part.strip() for part in str(notation).split(":")]
    if len(parts) != 2 or not all(parts):
        raise InvalidArgumentError(f"Invalid module id '{notation}': expected 'group:name'")
    return parts[0], parts[1]
