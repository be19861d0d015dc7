"""
Configuration Settings.

This module defines the catalogue configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_FORMATS = ("simple", "detailed", "json")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", alias="PATTERN_CATALOG_LOG_LEVEL", description="Console log level")
    format: str = Field(default="simple", alias="PATTERN_CATALOG_LOG_FORMAT", description="simple, detailed or json")
    file_dir: str = Field(default="logs", alias="PATTERN_CATALOG_LOG_FILE_DIR", description="Directory for log files")
    enable_file: bool = Field(
        default=False, alias="PATTERN_CATALOG_ENABLE_FILE_LOGGING", description="Also write logs to a file"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Catalogue settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="PATTERN_CATALOG_LOG_LEVEL",
    )
    log_format: str = Field(
        default="simple",
        description="Log line format (simple, detailed, json)",
        alias="PATTERN_CATALOG_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory that receives pattern_catalog.log when file logging is on",
        alias="PATTERN_CATALOG_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Write DEBUG logs to a file in addition to the console",
        alias="PATTERN_CATALOG_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # README Configuration
    # =====================================================================
    readme_title: str = Field(
        default="Design Patterns",
        description="Top-level heading of the generated README",
        alias="PATTERN_CATALOG_README_TITLE",
    )

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("log_format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in _LOG_FORMATS:
            raise ValueError(f"log format must be one of {', '.join(_LOG_FORMATS)}")
        return fmt

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig.model_validate(self.model_dump(by_alias=True))


_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the settings instance, building it on first use.

    Settings are not read at import time so that an invalid environment
    surfaces where the caller can report it, rather than as an import error.

    Raises:
        pydantic.ValidationError: If an environment variable or .env value is invalid.
    """
    global _settings_instance

    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Forget the cached settings so the next get_settings() re-reads the environment."""
    global _settings_instance

    _settings_instance = None
