"""Configuration management using Pydantic settings.

All configuration is loaded from environment variables with the
VENDING_ prefix. Supports .env files via python-dotenv.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vendingmachine.core.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application configuration via environment variables.

    All settings use the VENDING_ prefix in environment variables.
    Example: VENDING_DB_PATH, VENDING_LOG_LEVEL, etc.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VENDING_",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    db_path: Path = Field(
        default=Path("machine-db.db"),
        description="Path to SQLite database file, relative to the working directory",
    )

    # Seeding
    skip_existing_seed_rows: bool = Field(
        default=False,
        description="Leave rows with an existing key untouched instead of failing on re-seed",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses LRU cache to ensure settings are only loaded once.

    Raises:
        ConfigurationError: If an environment value fails validation
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
