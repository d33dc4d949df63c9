"""Configuration Management."""

from datetime import timedelta
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="ARBOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Resources
    resource_folders: list[str] = Field(
        default_factory=list, description="Folders searched by the default resource finder"
    )
    throw_exception_on_missing_resource: bool = Field(
        default=True, description="Raise when a localized string is missing"
    )
    use_default_on_missing_resource: bool = Field(
        default=True, description="Fall back to the caller's default for missing strings"
    )
    default_cache_duration: timedelta = Field(
        default=timedelta(hours=1), description="Cache duration for resources and markup"
    )
    resource_poll_frequency: timedelta | None = Field(
        default=None, description="Resource modification polling interval (None = off)"
    )
    use_timestamp_on_resources: bool = Field(
        default=True, description="Add modification time to static resource urls"
    )
    disable_gzip_compression: bool = Field(default=False, description="Never gzip resources")
    parent_folder_placeholder: str | None = Field(
        default=None, description="Replacement for '..' in resource urls"
    )

    # Markup
    enable_markup_cache: bool = Field(default=True, description="Cache markup lookups")
    markup_cache_size: int = Field(default=256, gt=0, description="Markup cache max size")

    # Metrics
    enable_metrics: bool = Field(default=True, description="Record Prometheus metrics")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
