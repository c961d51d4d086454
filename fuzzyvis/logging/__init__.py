"""
Logging for FuzzyVis: central configuration, debug mode, message sampling
and a timing decorator.
"""

from fuzzyvis.logging.config import (
    configure_logging,
    get_logger,
    is_debug_mode,
    set_debug_mode,
    should_sample_log,
)
from fuzzyvis.logging.helpers import log_performance

__all__ = [
    "configure_logging",
    "get_logger",
    "set_debug_mode",
    "is_debug_mode",
    "should_sample_log",
    "log_performance",
]
