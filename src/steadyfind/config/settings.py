"""Configuration management for steadyfind using pydantic-settings.

Supports environment variables (``STEADYFIND_`` prefix), ``.env`` files and
type validation for the defaults a :class:`~steadyfind.wait.site.Site` is
built from.
"""

import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SteadyfindSettings(BaseSettings):
    """Main configuration settings for steadyfind."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="STEADYFIND_",
        case_sensitive=False,
        extra="ignore",
    )

    # Wait settings
    max_app_wait_ms: int = Field(
        2000, ge=0, description="Default time (ms) to wait for the app to update elements"
    )
    latency_factor: float = Field(
        1.0, ge=0.0, description="Multiplier applied to every wait to absorb driver latency"
    )

    # Logging settings
    log_level: str = Field("INFO", description="Log level for steadyfind loggers")
    structured_logging: bool = Field(False, description="Render logs as JSON")
    log_file: Path | None = Field(None, description="Optional log file path")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize and check the log level name."""
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


class SteadyfindTestSettings(SteadyfindSettings):
    """Test-specific settings."""

    model_config = SettingsConfigDict(env_file=".env.test", env_prefix="STEADYFIND_")

    max_app_wait_ms: int = 500
    log_level: str = "DEBUG"


# Singleton instance
_settings: SteadyfindSettings | None = None


def get_settings(env: str | None = None) -> SteadyfindSettings:
    """Get the singleton settings instance.

    Args:
        env: Environment name ('test' selects :class:`SteadyfindTestSettings`)

    Returns:
        SteadyfindSettings instance
    """
    global _settings

    if _settings is None:
        env_name = env or os.getenv("STEADYFIND_ENV", "default")
        if env_name == "test":
            _settings = SteadyfindTestSettings()
        else:
            _settings = SteadyfindSettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
