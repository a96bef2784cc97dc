"""Settings manager for resolution strategy settings.yaml files.

Manages three-scope settings system:
- User global (~/.resolution-strategy/settings.yaml)
- Project (.resolution-strategy/settings.yaml)
- Local (.resolution-strategy/settings.local.yaml)

Only the ``resolution:`` section is interpreted here.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import InvalidArgumentError
from .schema import ResolutionSettings
from .strategy import ResolutionStrategy

logger = logging.getLogger(__name__)

SETTINGS_DIR_NAME = ".resolution-strategy"


class SettingsManager:
    """Reads settings across user/project/local scopes."""

    def __init__(self, settings_dir: Path | None = None, user_settings_file: Path | None = None):
        """Initialize settings manager with standard paths.

        Args:
            settings_dir: Base directory for project/local settings (for testing).
                          If None, uses .resolution-strategy in current directory.
            user_settings_file: Override for the user settings file (for testing).
        """
        if settings_dir is None:
            settings_dir = Path(SETTINGS_DIR_NAME)

        self.user_settings_file = user_settings_file or Path.home() / SETTINGS_DIR_NAME / "settings.yaml"
        self.project_settings_file = settings_dir / "settings.yaml"
        self.local_settings_file = settings_dir / "settings.local.yaml"

    def get_merged_settings(self) -> dict[str, Any]:
        """Get merged settings from all scopes.

        Merge order (later overrides earlier):
        1. User settings
        2. Project settings
        3. Local settings
        """
        merged: dict[str, Any] = {}
        for path in (self.user_settings_file, self.project_settings_file, self.local_settings_file):
            settings = self._read_settings(path)
            if settings:
                merged = deep_merge(merged, settings)
        return merged

    def get_resolution_settings(self) -> ResolutionSettings:
        """Validated ``resolution:`` section of the merged settings.

        Raises:
            InvalidArgumentError: Section fails validation
        """
        section = self.get_merged_settings().get("resolution") or {}
        try:
            return ResolutionSettings.model_validate(section)
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid resolution settings: {e}") from e

    def _read_settings(self, path: Path) -> dict[str, Any] | None:
        """Read settings from YAML file.

        Returns:
            Settings dict or None if file doesn't exist

        Raises:
            InvalidArgumentError: File is not valid YAML or not a mapping
        """
        if not path.exists():
            return None

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidArgumentError(f"Failed to parse settings from {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"Settings file {path} must contain a mapping")
        logger.debug(f"[settings:read] {path}")
        return data


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, overlay taking precedence."""
    result = base.copy()

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def apply_settings(strategy: ResolutionStrategy, settings: ResolutionSettings) -> ResolutionStrategy:
    """Apply validated settings to a strategy through its public, guarded API."""
    if settings.force:
        strategy.force(*settings.force)
    if settings.fail_on_version_conflict:
        strategy.fail_on_version_conflict()
    if settings.cache.dynamic_versions:
        strategy.cache_dynamic_versions_for(settings.cache.dynamic_versions.amount, settings.cache.dynamic_versions.unit)
    if settings.cache.changing_modules:
        strategy.cache_changing_modules_for(settings.cache.changing_modules.amount, settings.cache.changing_modules.unit)
    return strategy


def load_strategy(manager: SettingsManager | None = None) -> ResolutionStrategy:
    """Build a strategy from the merged settings."""
    manager = manager or SettingsManager()
    return apply_settings(ResolutionStrategy(), manager.get_resolution_settings())
