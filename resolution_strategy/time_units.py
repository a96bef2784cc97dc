"""Duration units for cache TTLs.

All TTLs are normalised to integer milliseconds. Unit names are matched
case-insensitively against full words and common abbreviations.
"""

from __future__ import annotations

from enum import Enum

from .errors import InvalidArgumentError


class TimeUnit(Enum):
    """Supported duration units, valued in milliseconds."""

    MILLISECONDS = 1
    SECONDS = 1000
    MINUTES = 60 * 1000
    HOURS = 60 * 60 * 1000
    DAYS = 24 * 60 * 60 * 1000

    @property
    def millis(self) -> int:
        return self.value

    def to_millis(self, amount: int) -> int:
        """Convert an integer amount of this unit to milliseconds."""
        return amount * self.value


_ALIASES: dict[str, TimeUnit] = {
    "milliseconds": TimeUnit.MILLISECONDS,
    "millisecond": TimeUnit.MILLISECONDS,
    "millis": TimeUnit.MILLISECONDS,
    "ms": TimeUnit.MILLISECONDS,
    "seconds": TimeUnit.SECONDS,
    "second": TimeUnit.SECONDS,
    "secs": TimeUnit.SECONDS,
    "sec": TimeUnit.SECONDS,
    "s": TimeUnit.SECONDS,
    "minutes": TimeUnit.MINUTES,
    "minute": TimeUnit.MINUTES,
    "mins": TimeUnit.MINUTES,
    "min": TimeUnit.MINUTES,
    "m": TimeUnit.MINUTES,
    "hours": TimeUnit.HOURS,
    "hour": TimeUnit.HOURS,
    "hrs": TimeUnit.HOURS,
    "hr": TimeUnit.HOURS,
    "h": TimeUnit.HOURS,
    "days": TimeUnit.DAYS,
    "day": TimeUnit.DAYS,
    "d": TimeUnit.DAYS,
}


def parse_time_unit(unit: str | TimeUnit) -> TimeUnit:
    """Look up a TimeUnit by name.

    Args:
        unit: Unit name (e.g. "minutes", "MS", "h") or a TimeUnit

    Raises:
        InvalidArgumentError: Unrecognised unit name
    """
    if isinstance(unit, TimeUnit):
        return unit

    key = str(unit).strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]

    raise InvalidArgumentError(
        f"Unknown time unit '{unit}'. Supported units: {', '.join(known_unit_names())}"
    )


def known_unit_names() -> list[str]:
    """Full unit names, shortest duration first."""
    return [unit.name.lower() for unit in TimeUnit]


def aliases_for(unit: TimeUnit) -> list[str]:
    return [alias for alias, target in _ALIASES.items() if target is unit]
