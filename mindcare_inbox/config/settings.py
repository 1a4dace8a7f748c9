"""
Application settings and configuration.
"""

from typing import Optional
import pytz
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MINDCARE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "MindCare Inbox"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8001

    # Sync
    sync_interval_seconds: float = Field(default=10.0)

    # Record store files
    bookings_path: str = "mindcare_bookings.json"
    users_path: str = "mindcare_registered_users.json"

    # Provider identity the HTTP app starts with
    provider_id: Optional[str] = None
    provider_name: Optional[str] = None

    # Derivation
    placeholder_email: str = "patient@example.com"

    # Timezone
    timezone: str = "UTC"

    # Logging
    log_level: str = "INFO"

    @field_validator("sync_interval_seconds")
    @classmethod
    def _positive_interval(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("sync_interval_seconds must be positive")
        return value

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            pytz.timezone(value)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"unknown timezone: {value}")
        return value


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
