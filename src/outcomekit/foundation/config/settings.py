"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from outcomekit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.messages.internal_error
    'Internal error'
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # OUTCOMEKIT_LOG_LEVEL=DEBUG
    # OUTCOMEKIT_MESSAGES_INTERNAL_ERROR="Something went wrong"
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from outcomekit.errors.kinds import INTERNAL_ERROR, UNKNOWN_ERROR


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="OUTCOMEKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class MessageSettings(BaseSettings):
    """Default texts used when an outcome has to be synthesized."""

    model_config = SettingsConfigDict(
        env_prefix="OUTCOMEKIT_MESSAGES_",
        extra="ignore",
    )

    internal_error: str = Field(default=INTERNAL_ERROR, min_length=1, description="Used for absent source outcomes")
    unknown_error: str = Field(default=UNKNOWN_ERROR, min_length=1, description="Used for exceptions without a message")
    db_failure: str = Field(default="Database operation failed.", min_length=1)
    save_failure_template: str = Field(
        default="Error saving {name}",
        description="Formatted with the model's type name when a save affects no rows",
    )


class OutcomeKitSettings(BaseSettings):
    """Root settings for outcomekit.

    Loads configuration from environment variables with OUTCOMEKIT_ prefix.

    Example environment variables:
        OUTCOMEKIT_DEBUG=true
        OUTCOMEKIT_LOG_FORMAT=json
        OUTCOMEKIT_MESSAGES_UNKNOWN_ERROR="Unexpected failure"
    """

    model_config = SettingsConfigDict(
        env_prefix="OUTCOMEKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    environment: Literal["development", "staging", "production"] = "development"

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    messages: MessageSettings = Field(default_factory=MessageSettings)

    @field_validator("environment", mode="before")
    @classmethod
    def _normalize_env(cls, v: str) -> str:
        """Normalize environment name to lowercase."""
        return v.lower() if isinstance(v, str) else v

    @computed_field
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> OutcomeKitSettings:
    """Get the global settings instance (cached)."""
    return OutcomeKitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
