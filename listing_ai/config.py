"""
Centralized configuration management for listing-ai.

This module provides a Pydantic Settings-based configuration system that:
- Validates environment variables at startup
- Provides type coercion (strings to ints, bools, etc.)
- Groups related settings for better organization
- Supports .env file loading

Usage:
    from listing_ai.config import get_settings

    settings = get_settings()
    if settings.is_supabase_configured:
        # Persist results to Supabase
        ...
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# Environment Settings
# =============================================================================


class EnvironmentSettings(BaseSettings):
    """Deployment environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment environment",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() in ("production", "prod")


# =============================================================================
# Database Settings (Supabase)
# =============================================================================


class DatabaseSettings(BaseSettings):
    """Configuration for the Supabase result store."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL",
    )
    supabase_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("supabase_key", "supabase_service_key"),
        description="Supabase anon or service role key",
    )
    compliance_table: str = Field(
        default="compliance_checks",
        description="Table holding compliance results",
    )
    seo_table: str = Field(
        default="seo_analyses",
        description="Table holding SEO results",
    )

    @property
    def is_configured(self) -> bool:
        """Check if Supabase is properly configured."""
        return bool(self.supabase_url and self.supabase_key)


# =============================================================================
# Logging Settings
# =============================================================================


class LoggingSettings(BaseSettings):
    """Configuration for logging."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_format_json: bool = Field(
        default=False,
        description="Force JSON log format in development",
    )


# =============================================================================
# Analysis Settings
# =============================================================================


class AnalysisSettings(BaseSettings):
    """Limits applied before analysis is run."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_text_length: int = Field(
        default=20000,
        ge=1,
        description="Maximum listing text length accepted by the service",
    )


# =============================================================================
# Main Settings
# =============================================================================


class Settings(BaseSettings):
    """
    Main settings class that aggregates all configuration groups.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    deployment: EnvironmentSettings = Field(default_factory=EnvironmentSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)

    @property
    def is_supabase_configured(self) -> bool:
        """Check if Supabase result storage is available."""
        return self.database.is_configured

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.deployment.is_production

    def get_config_summary(self) -> dict:
        """
        Get a summary of configuration status for logging.

        Secrets are never included.
        """
        return {
            "environment": self.deployment.environment,
            "supabase_configured": self.is_supabase_configured,
            "log_level": self.logging.log_level,
            "max_text_length": self.analysis.max_text_length,
        }


# =============================================================================
# Settings Singleton
# =============================================================================


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings.

    Raises:
        ValidationError: If configuration is invalid
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Reload settings from environment.

    This clears the cache and returns fresh settings.
    Useful for testing or after environment changes.
    """
    get_settings.cache_clear()
    return get_settings()
