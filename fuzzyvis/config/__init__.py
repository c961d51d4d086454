"""Runtime settings for FuzzyVis."""

from fuzzyvis.config.settings import (
    LoggingSettings,
    PathSettings,
    SamplingSettings,
    clear_settings_cache,
    get_logging_settings,
    get_path_settings,
    get_sampling_settings,
)

__all__ = [
    "SamplingSettings",
    "LoggingSettings",
    "PathSettings",
    "get_sampling_settings",
    "get_logging_settings",
    "get_path_settings",
    "clear_settings_cache",
]
