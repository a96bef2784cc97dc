"""Cache freshness policy for time-variant metadata.

Two independent TTLs are held, both in milliseconds:

- dynamic versions: how long a resolved range/latest selector stays valid
- changing modules: how long content behind a fixed, changing coordinate stays valid

The policy only stores TTLs. The caching layer that owns timestamped entries
asks ``must_refresh_*`` with the entry's age.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import InvalidArgumentError
from .time_units import TimeUnit
from .time_units import parse_time_unit

logger = logging.getLogger(__name__)

CACHE_FOREVER = 2**63 - 1
DEFAULT_TTL_MS = TimeUnit.DAYS.millis


def _to_millis(amount: int, unit: str | TimeUnit) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidArgumentError(f"Cache duration must be an integer, got {amount!r}")
    if amount < 0:
        raise InvalidArgumentError(f"Cache duration must not be negative, got {amount}")
    return min(parse_time_unit(unit).to_millis(amount), CACHE_FOREVER)


@dataclass
class CachePolicy:
    """TTL settings for dynamic versions and changing modules."""

    dynamic_version_ttl_ms: int = DEFAULT_TTL_MS
    changing_module_ttl_ms: int = DEFAULT_TTL_MS

    def cache_dynamic_versions_for(self, amount: int, unit: str | TimeUnit) -> None:
        self.dynamic_version_ttl_ms = _to_millis(amount, unit)
        logger.debug(f"[cache:policy] dynamic versions cached for {self.dynamic_version_ttl_ms}ms")

    def cache_changing_modules_for(self, amount: int, unit: str | TimeUnit) -> None:
        self.changing_module_ttl_ms = _to_millis(amount, unit)
        logger.debug(f"[cache:policy] changing modules cached for {self.changing_module_ttl_ms}ms")

    def must_refresh_dynamic_version(self, age_ms: int) -> bool:
        """Whether a cached dynamic version listing of the given age is stale."""
        return _is_stale(self.dynamic_version_ttl_ms, age_ms)

    def must_refresh_changing_module(self, age_ms: int) -> bool:
        """Whether cached changing module content of the given age is stale."""
        return _is_stale(self.changing_module_ttl_ms, age_ms)

    def copy(self) -> CachePolicy:
        return CachePolicy(
            dynamic_version_ttl_ms=self.dynamic_version_ttl_ms,
            changing_module_ttl_ms=self.changing_module_ttl_ms,
        )


def _is_stale(ttl_ms: int, age_ms: int) -> bool:
    if ttl_ms == 0:
        return True
    if ttl_ms >= CACHE_FOREVER:
        return False
    return age_ms > ttl_ms
