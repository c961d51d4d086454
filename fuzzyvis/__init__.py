"""
FuzzyVis - fuzzy membership functions and fuzzification visualization data.
"""

from dotenv import load_dotenv

from fuzzyvis.logging import (
    configure_logging,
    get_logger,
    is_debug_mode,
    log_performance,
    set_debug_mode,
)
from fuzzyvis.version import __version__

# Load environment variables from .env file
load_dotenv()

__all__ = [
    "__version__",
    "configure_logging",
    "get_logger",
    "is_debug_mode",
    "set_debug_mode",
    "log_performance",
]
