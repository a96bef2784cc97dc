"""Resolution strategy aggregate.

Owns forced modules, dependency resolve rules, component selection rules,
the cache policy and the conflict resolution mode. Build logic mutates the
live instance; the resolution engine works on a ``copy()`` taken when
resolution starts. Copies share no mutable state with their source and carry
no mutation validator.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from collections.abc import Iterable
from typing import Any

from .cache_policy import CachePolicy
from .component_selection import ComponentSelectionRules
from .conflict_resolution import ConflictResolution
from .conflict_resolution import LatestConflictResolution
from .conflict_resolution import StrictConflictResolution
from .coordinates import ModuleCoordinate
from .forced_modules import ForcedModuleRegistry
from .mutation import FreezingMutationValidator
from .mutation import MutationGuard
from .mutation import MutationValidator
from .resolve_rules import ResolveRule
from .resolve_rules import compose_resolve_rule
from .time_units import TimeUnit

logger = logging.getLogger(__name__)


class ResolutionStrategy:
    """Per-configuration dependency resolution strategy."""

    def __init__(self, cache_policy: CachePolicy | None = None):
        self._guard = MutationGuard()
        self._cache_policy = cache_policy if cache_policy is not None else CachePolicy()
        self._forced_modules = ForcedModuleRegistry()
        self._resolve_rules: list[ResolveRule] = []
        self._component_selection = ComponentSelectionRules(self._guard)
        self._conflict_resolution: ConflictResolution = LatestConflictResolution()

    # Forced modules

    @property
    def forced_modules(self) -> tuple[ModuleCoordinate, ...]:
        return self._forced_modules.all()

    @forced_modules.setter
    def forced_modules(self, notations: Iterable[Any]) -> None:
        self.set_forced_modules(notations)

    def force(self, *notations: Any) -> ResolutionStrategy:
        """Append forced modules, e.g. ``force("org:foo:1.0", {"group": ..})``."""
        self._guard.check()
        self._forced_modules.add(*notations)
        logger.debug(f"[strategy:force] {', '.join(str(n) for n in notations)}")
        return self

    def set_forced_modules(self, notations: Iterable[Any]) -> ResolutionStrategy:
        """Replace all forced modules."""
        self._guard.check()
        self._forced_modules.replace(notations)
        logger.debug(f"[strategy:force] replaced with {len(self._forced_modules)} modules")
        return self

    # Dependency resolve rules

    def each_dependency(self, rule: ResolveRule) -> ResolutionStrategy:
        """Register a rule run for every dependency, after forcing."""
        self._guard.check()
        self._resolve_rules.append(rule)
        return self

    @property
    def dependency_resolve_rules(self) -> tuple[ResolveRule, ...]:
        return tuple(self._resolve_rules)

    @property
    def dependency_resolve_rule(self) -> ResolveRule:
        """Single rule applying forced modules and then every user rule."""
        return compose_resolve_rule(self._forced_modules.all(), self._resolve_rules)

    # Component selection

    @property
    def component_selection(self) -> ComponentSelectionRules:
        return self._component_selection

    def component_selection_rules(self, action: Callable[[ComponentSelectionRules], Any]) -> ResolutionStrategy:
        self._component_selection.configure(action)
        return self

    # Conflict resolution

    @property
    def conflict_resolution(self) -> ConflictResolution:
        return self._conflict_resolution

    def fail_on_version_conflict(self) -> ResolutionStrategy:
        self._guard.check()
        self._conflict_resolution = StrictConflictResolution()
        return self

    # Cache policy

    @property
    def cache_policy(self) -> CachePolicy:
        return self._cache_policy

    def cache_dynamic_versions_for(self, amount: int, unit: str | TimeUnit) -> ResolutionStrategy:
        self._cache_policy.cache_dynamic_versions_for(amount, unit)
        return self

    def cache_changing_modules_for(self, amount: int, unit: str | TimeUnit) -> ResolutionStrategy:
        self._cache_policy.cache_changing_modules_for(amount, unit)
        return self

    # Mutation guard and snapshots

    def attach_guard(self, validator: MutationValidator | None) -> ResolutionStrategy:
        """Install the validator consulted before every public mutation."""
        self._guard.attach(validator)
        return self

    def copy(self) -> ResolutionStrategy:
        """Independent snapshot for resolution, without a mutation validator."""
        copy = ResolutionStrategy(self._cache_policy.copy())
        copy._forced_modules = self._forced_modules.copy()
        copy._resolve_rules = list(self._resolve_rules)
        copy._component_selection = self._component_selection.copy(copy._guard)
        copy._conflict_resolution = self._conflict_resolution
        return copy

    def snapshot_for_resolution(self, validator: FreezingMutationValidator) -> ResolutionStrategy:
        """Copy this strategy and freeze the given validator."""
        snapshot = self.copy()
        validator.freeze()
        return snapshot

    def describe(self) -> dict[str, Any]:
        """Plain summary for reporting."""
        return {
            "forced_modules": [str(m) for m in self._forced_modules],
            "dependency_resolve_rules": len(self._resolve_rules),
            "component_selection_rules": len(self._component_selection),
            "conflict_resolution": self._conflict_resolution.mode.value,
            "cache": {
                "dynamic_versions_ms": self._cache_policy.dynamic_version_ttl_ms,
                "changing_modules_ms": self._cache_policy.changing_module_ttl_ms,
            },
        }

    def __repr__(self) -> str:
        return (
            f"ResolutionStrategy(forced={len(self._forced_modules)}, rules={len(self._resolve_rules)}, "
            f"conflict={self._conflict_resolution.mode.value})"
        )
