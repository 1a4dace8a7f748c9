"""
Sync engine policy configuration.
"""

import pytz
from pydantic import BaseModel, Field, field_validator

from .settings import Settings


class SyncConfig(BaseModel):
    """Policy values for the conversation sync engine."""

    interval_seconds: float = Field(default=10.0, gt=0)
    placeholder_email: str = "patient@example.com"
    timezone: str = "UTC"

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            pytz.timezone(value)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"unknown timezone: {value}")
        return value

    @classmethod
    def from_settings(cls, settings: Settings) -> "SyncConfig":
        """Build the sync policy from application settings."""
        return cls(
            interval_seconds=settings.sync_interval_seconds,
            placeholder_email=settings.placeholder_email,
            timezone=settings.timezone,
        )
