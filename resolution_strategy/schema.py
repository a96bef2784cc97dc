"""Pydantic schemas for the ``resolution:`` settings section."""

from pydantic import BaseModel
from pydantic import Field


class CacheDuration(BaseModel):
    """A cache TTL as an integer amount and a unit name."""

    amount: int = Field(..., ge=0, description="Duration amount")
    unit: str = Field("seconds", description="Unit name, e.g. 'minutes' or 'h'")


class CacheSettings(BaseModel):
    """Cache TTL overrides."""

    dynamic_versions: CacheDuration | None = Field(None, description="TTL for dynamic version listings")
    changing_modules: CacheDuration | None = Field(None, description="TTL for changing module content")


class ResolutionSettings(BaseModel):
    """Complete resolution strategy settings."""

    force: list[str] = Field(default_factory=list, description="Forced modules as 'group:name:version'")
    fail_on_version_conflict: bool = Field(default=False, description="Fail resolution on any version conflict")
    cache: CacheSettings = Field(default_factory=CacheSettings)
