"""
FuzzyVis Settings Manager - Runtime configuration management.

Settings are read from environment variables (and a .env file loaded at
package import) with the prefixes documented on each class.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SamplingSettings(BaseSettings):
    """Domain sampling settings.

    Environment variables:
        FUZZYVIS_SAMPLING_RESOLUTION: Number of intervals the domain is
            split into when sampling a chart series. Default: 120
    """

    resolution: int = Field(
        default=120,
        gt=0,
        description="Number of sampling intervals across the domain",
    )

    model_config = SettingsConfigDict(env_prefix="FUZZYVIS_SAMPLING_")


class LoggingSettings(BaseSettings):
    """Logging Settings."""

    level: str = Field(default="WARNING", description="Console log level")
    log_dir: Optional[Path] = Field(
        default=None, description="Directory for rotating log files"
    )

    model_config = SettingsConfigDict(env_prefix="FUZZYVIS_LOGGING_")


class PathSettings(BaseSettings):
    """Filesystem locations.

    Environment variables:
        FUZZYVIS_CONFIG_DIR: Directory holding fuzzy variable YAML files
    """

    config_dir: Path = Field(default=Path("config"))

    model_config = SettingsConfigDict(env_prefix="FUZZYVIS_")


@lru_cache
def get_sampling_settings() -> SamplingSettings:
    """Get sampling settings."""
    return SamplingSettings()


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get logging settings."""
    return LoggingSettings()


@lru_cache
def get_path_settings() -> PathSettings:
    """Get path settings."""
    return PathSettings()


def clear_settings_cache() -> None:
    """Clear cached settings so environment changes take effect."""
    get_sampling_settings.cache_clear()
    get_logging_settings.cache_clear()
    get_path_settings.cache_clear()
