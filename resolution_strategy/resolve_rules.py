"""Dependency resolve rules and their composition.

A resolve rule is any callable taking a ``DependencyResolveDetails``. The
strategy composes its forced modules and user rules into one callable:

1. Forcing rule (only if forced modules exist): the first forced entry for the
   requested ``group:name`` sets the version with reason FORCED.
2. User rules, in registration order. Every rule runs; the last write wins.

With nothing to apply, the composed rule is a no-op that never touches the
details it is given.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from collections.abc import Iterable
from enum import Enum

from .coordinates import ModuleCoordinate
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class VersionSelectionReason(str, Enum):
    """Why a version was chosen for a dependency."""

    REQUESTED = "requested"
    ROOT = "root"
    FORCED = "forced"
    CONFLICT_RESOLUTION = "conflict resolution"
    SELECTED_BY_RULE = "selected by rule"

    @property
    def description(self) -> str:
        return self.value


class DependencyResolveDetails:
    """Mutable per-edge resolution state handed to resolve rules.

    Attributes:
        requested: Coordinate as declared by the dependency
        target: Coordinate that will be used (starts as ``requested``)
        selection_reason: Reason of the last update, None if never updated
    """

    def __init__(self, requested: ModuleCoordinate):
        self.requested = requested
        self.target = requested
        self.selection_reason: VersionSelectionReason | None = None

    @property
    def updated(self) -> bool:
        return self.selection_reason is not None

    def use_version(
        self, version: str, reason: VersionSelectionReason = VersionSelectionReason.SELECTED_BY_RULE
    ) -> None:
        """Use a different version of the requested module.

        Raises:
            InvalidArgumentError: Empty version
        """
        if not version:
            raise InvalidArgumentError(
                f"Configuring the resolve details of '{self.requested}' with an empty version is not allowed."
            )
        self.target = self.requested.with_version(version)
        self.selection_reason = reason

    def __repr__(self) -> str:
        return f"DependencyResolveDetails(requested={self.requested}, target={self.target}, reason={self.selection_reason})"


ResolveRule = Callable[[DependencyResolveDetails], None]


class ForcedVersionRule:
    """Applies forced versions, keyed by ``group:name``, first entry wins."""

    def __init__(self, forced_modules: Iterable[ModuleCoordinate]):
        self.forced_versions: dict[str, str] = {}
        for module in forced_modules:
            self.forced_versions.setdefault(module.module_id, module.version)

    def __call__(self, details: DependencyResolveDetails) -> None:
        requested = details.requested
        version = self.forced_versions.get(requested.module_id)
        if version is not None:
            logger.debug(f"[resolve:forced] {requested} -> {version}")
            details.use_version(version, VersionSelectionReason.FORCED)


class CompositeResolveRule:
    """Runs a fixed sequence of resolve rules in order."""

    def __init__(self, rules: Iterable[ResolveRule]):
        self.rules: tuple[ResolveRule, ...] = tuple(rules)

    def __call__(self, details: DependencyResolveDetails) -> None:
        for rule in self.rules:
            rule(details)


def no_op_rule(details: DependencyResolveDetails) -> None:
    """Resolve rule used when nothing is configured."""


def compose_resolve_rule(
    forced_modules: Iterable[ModuleCoordinate], user_rules: Iterable[ResolveRule]
) -> ResolveRule:
    """Build the single resolve rule consumed by the resolution engine.

    Args:
        forced_modules: Forced coordinates, in registration order
        user_rules: Rules registered via ``each_dependency``, in registration order

    Returns:
        Callable applying forcing first, then every user rule
    """
    forced_modules = tuple(forced_modules)
    rules: list[ResolveRule] = []
    if forced_modules:
        rules.append(ForcedVersionRule(forced_modules))
    rules.extend(user_rules)

    if not rules:
        return no_op_rule
    return CompositeResolveRule(rules)
