"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Search backend
    solr_url: str = Field(
        default="http://solr.lib.virginia.edu:8082/solr",
        min_length=1,
        description="Solr base URL",
    )
    solr_core: str = Field(default="core", min_length=1, description="Solr core")
    solr_timeout: float = Field(
        default=10.0, description="Timeout in seconds for Solr requests"
    )

    # Public site used for access, metadata and manifest URLs
    site_url: str = Field(
        default="https://search.lib.virginia.edu",
        description="Public catalog base URL",
    )

    # Application Configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8080, description="Aries Virgo port")
    log_level: str = Field(default="INFO", description="Logging level")

    # Feature Flags
    enable_telemetry: bool = Field(default=True, description="Enable PostHog telemetry")

    # PostHog Configuration
    posthog_api_key: str | None = Field(None, description="PostHog API key for telemetry")
    posthog_host: str = Field(default="https://us.i.posthog.com", description="PostHog host URL")

    # Sentry Configuration
    sentry_dsn: str | None = Field(None, description="Sentry DSN for error tracking")

    # Application Metadata
    app_name: str = Field(default="Aries-Virgo", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @field_validator("solr_url", "site_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        url = value.rstrip("/")
        if not url:
            raise ValueError("URL must not be blank")
        return url

    @field_validator("solr_core")
    @classmethod
    def _strip_core_slashes(cls, value: str) -> str:
        core = value.strip("/")
        if not core:
            raise ValueError("solr_core must name a core")
        return core


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
