"""
Configuration management for keycalc.

Handles loading configuration from environment variables and an optional
.env file, and provides sensible defaults for all settings.
"""

from enum import Enum
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class NonFinitePolicy(str, Enum):
    """What to do when an operation yields NaN or infinity."""
    RAISE = "raise"  # Fail with NonFiniteResultError
    PROPAGATE = "propagate"  # Pass the value through unfiltered


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="KEYCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    app_name: str = "keycalc"
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"

    # Evaluation settings
    non_finite_policy: NonFinitePolicy = NonFinitePolicy.RAISE

    # CLI input: accept * and / for × and ÷
    ascii_operators: bool = True


# Global settings instance
settings = Settings()
