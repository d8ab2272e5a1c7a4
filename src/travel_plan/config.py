"""
Centralized configuration for the travel plan manager.

Uses Pydantic BaseSettings for validated, typed configuration from environment variables.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """
    Application configuration loaded from environment variables.

    All settings can be overridden via environment variables prefixed with TRAVEL_PLAN_.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRAVEL_PLAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # =========================================================================
    # Storage
    # =========================================================================

    data_file: Path = Field(
        default=Path("travel_plan.json"),
        description="JSON document holding the saved trips"
    )
    strict_load: bool = Field(
        default=False,
        description="Report a corrupted trip file instead of loading it as empty"
    )

    # =========================================================================
    # Display
    # =========================================================================

    currency_symbol: str = Field(
        default="¥",
        description="Prefix printed in front of fares"
    )

    # =========================================================================
    # Logging
    # =========================================================================

    log_level: str = Field(
        default="WARNING",
        description="Application log level"
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file (receives DEBUG and up)"
    )

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper

    # =========================================================================
    # Validation
    # =========================================================================

    def validate_config(self) -> tuple[bool, list[str]]:
        """
        Validate configuration and return warnings.

        Returns:
            Tuple of (is_valid, list_of_warnings)
        """
        warnings = []

        parent = self.data_file.parent
        if str(parent) not in ("", ".") and not parent.exists():
            warnings.append(
                f"Data directory '{parent}' does not exist yet. "
                "It will be created on the first save."
            )

        return len(warnings) == 0, warnings


@lru_cache()
def get_config() -> AppConfig:
    """
    Get the application configuration (cached singleton).

    Returns:
        AppConfig instance
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the cached configuration (useful for testing)."""
    get_config.cache_clear()
