"""
Centralized Settings Configuration

Uses Pydantic Settings to load configuration from environment variables
with validation and type coercion.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Display
    display_precision: int = 1
    no_data_marker: str = "-"

    # Leaderboard
    default_leaderboard_category: str = "pi"

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "console"
    service_name: str = "pickup-stats-engine"

    # Development mode
    development_mode: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is either json or console."""
        lower_v = v.lower()
        if lower_v not in {"json", "console"}:
            raise ValueError("log_format must be 'json' or 'console'")
        return lower_v

    @field_validator("display_precision")
    @classmethod
    def validate_display_precision(cls, v: int) -> int:
        if v < 0:
            raise ValueError("display_precision must be >= 0")
        return v

    @field_validator("default_leaderboard_category")
    @classmethod
    def validate_default_leaderboard_category(cls, v: str) -> str:
        """Validate the default sort is one of the leaderboard categories."""
        valid_categories = {"points", "rebounds", "assists", "steals", "blocks", "pi"}
        lower_v = v.lower()
        if lower_v not in valid_categories:
            raise ValueError(f"default_leaderboard_category must be one of {valid_categories}")
        return lower_v


def get_settings() -> Settings:
    """
    Get application settings.

    This function creates a new Settings instance each time,
    allowing for testing with different configurations.
    """
    return Settings()


# Default settings instance for convenience
# Import this for quick access: from core.settings import settings
settings = Settings()
