"""Dependency resolution strategy engine.

Composes forced modules, dependency resolve rules, component selection rules,
cache TTLs and the conflict resolution mode into per-configuration strategies,
with snapshot copies for the resolution engine and a mutation guard for the
live instance.
"""

from .cache_policy import CACHE_FOREVER
from .cache_policy import CachePolicy
from .component_selection import ComponentSelection
from .component_selection import ComponentSelectionRule
from .component_selection import ComponentSelectionRules
from .conflict_resolution import ConflictMode
from .conflict_resolution import ConflictResolution
from .conflict_resolution import LatestConflictResolution
from .conflict_resolution import StrictConflictResolution
from .coordinates import ModuleCoordinate
from .coordinates import parse_coordinate
from .errors import InvalidArgumentError
from .errors import MutationNotAllowedError
from .errors import StrategyError
from .mutation import FreezingMutationValidator
from .mutation import MutationType
from .resolve_rules import DependencyResolveDetails
from .resolve_rules import VersionSelectionReason
from .strategy import ResolutionStrategy
from .time_units import TimeUnit

__all__ = [
    "CACHE_FOREVER",
    "CachePolicy",
    "ComponentSelection",
    "ComponentSelectionRule",
    "ComponentSelectionRules",
    "ConflictMode",
    "ConflictResolution",
    "LatestConflictResolution",
    "StrictConflictResolution",
    "ModuleCoordinate",
    "parse_coordinate",
    "StrategyError",
    "InvalidArgumentError",
    "MutationNotAllowedError",
    "FreezingMutationValidator",
    "MutationType",
    "DependencyResolveDetails",
    "VersionSelectionReason",
    "ResolutionStrategy",
    "TimeUnit",
]
