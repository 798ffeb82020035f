"""
Runtime configuration.

Settings are read from ``TIDEWATCH_*`` environment variables (or a ``.env``
file) and provide the library-wide defaults that sit underneath every
operation's own defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tidewatch.schemas import Datum, MeasurementSystem, ResponseFormat, TimeZone


class Settings(BaseSettings):
    """Library and CLI configuration."""

    app_name: str = Field(default="tidewatch")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    # Station used by the CLI when --station is omitted (Eastport, ME)
    default_station: str = Field(default="8410140")

    # Library-wide request defaults
    units: MeasurementSystem = Field(default=MeasurementSystem.IMPERIAL)
    time_zone: TimeZone = Field(default=TimeZone.LST_LDT)
    response_format: ResponseFormat = Field(default=ResponseFormat.JSON)
    datum: Datum = Field(default=Datum.MLLW)
    application: str = Field(
        default="tidewatch", description="Sent as the `application` query parameter"
    )
    request_timeout: float = Field(default=30.0, gt=0, description="Seconds per request")

    model_config = SettingsConfigDict(
        env_prefix="TIDEWATCH_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
