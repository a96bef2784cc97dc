"""Ordered registry of forced module coordinates."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .coordinates import ModuleCoordinate
from .coordinates import parse_coordinate


class ForcedModuleRegistry:
    """Insertion-ordered, duplicate-permitting list of forced coordinates.

    Notations are parsed before the registry changes, so a malformed entry
    leaves the contents untouched.
    """

    def __init__(self, modules: Iterable[ModuleCoordinate] = ()):
        self._modules: list[ModuleCoordinate] = list(modules)

    def add(self, *notations: Any) -> None:
        parsed = [parse_coordinate(n) for n in notations]
        self._modules.extend(parsed)

    def replace(self, notations: Iterable[Any]) -> None:
        parsed = [parse_coordinate(n) for n in notations]
        self._modules = parsed

    def all(self) -> tuple[ModuleCoordinate, ...]:
        return tuple(self._modules)

    def copy(self) -> ForcedModuleRegistry:
        return ForcedModuleRegistry(self._modules)

    def __len__(self) -> int:
        return len(self._modules)

    def __bool__(self) -> bool:
        return bool(self._modules)

    def __iter__(self):
        return iter(tuple(self._modules))
