"""
Central logging setup for FuzzyVis.

The CLI calls :func:`configure_logging` once per invocation. Library modules
only ask for loggers via :func:`get_logger` and never attach handlers.
Console output goes to stderr so that CSV and JSON written to stdout stay
machine readable.
"""

import logging
import logging.handlers
import sys
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Optional, Union

PACKAGE_LOGGER = "fuzzyvis"
LOG_FILE_NAME = "fuzzyvis.log"

_debug_enabled = False

# Occurrence counts per sampling key
_LOG_SAMPLING_STATE: Counter = Counter()

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s.%(funcName)s:%(lineno)d | %(message)s"
)
_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_RESET = "\033[0m"
_LEVEL_COLORS = {
    logging.DEBUG: "\033[94m",
    logging.INFO: "\033[92m",
    logging.WARNING: "\033[93m",
    logging.ERROR: "\033[91m",
    logging.CRITICAL: "\033[91m\033[1m",
}


class ColorFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    def format(self, record):
        color = _LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # Other handlers share the record, so color a copy
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{_RESET}"
        return super().format(colored)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (usually the caller's ``__name__``)."""
    return logging.getLogger(name)


def set_debug_mode(enabled: bool) -> None:
    """
    Switch the package logger between DEBUG and INFO.

    Args:
        enabled: True for DEBUG, False for INFO
    """
    global _debug_enabled
    changed = bool(enabled) != _debug_enabled
    _debug_enabled = bool(enabled)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if _debug_enabled else logging.INFO)
    if changed:
        package_logger.debug("Debug mode %s", "on" if _debug_enabled else "off")


def is_debug_mode() -> bool:
    return _debug_enabled


def _console_handler(level: int, fmt: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(ColorFormatter(fmt))
    return handler


def _file_handler(
    log_dir: Union[str, Path], level: int, fmt: str, max_bytes: int, backups: int
) -> logging.Handler:
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        filename=directory / LOG_FILE_NAME,
        maxBytes=max_bytes,
        backupCount=backups,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(
    log_dir: Optional[Union[str, Path]] = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
    config: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Install the console handler and, when ``log_dir`` is given, a rotating
    file handler on the root logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        log_dir: Directory for ``fuzzyvis.log``; console only when omitted
        console_level: Level for the stderr handler
        file_level: Level for the file handler
        max_file_size_mb: Size at which the log file rotates
        backup_count: Rotated files to keep
        config: Optional overrides: ``console_format``, ``file_format``
            and ``debug_mode``
    """
    options = config or {}

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    # Handlers do the filtering
    root.setLevel(logging.DEBUG)

    root.addHandler(
        _console_handler(console_level, options.get("console_format", _CONSOLE_FORMAT))
    )
    if log_dir:
        root.addHandler(
            _file_handler(
                log_dir,
                file_level,
                options.get("file_format", _FILE_FORMAT),
                max_file_size_mb * 1024 * 1024,
                backup_count,
            )
        )

    set_debug_mode(options.get("debug_mode", _debug_enabled))
    logging.getLogger(PACKAGE_LOGGER).debug(
        "Logging configured (console=%s, log_dir=%s)",
        logging.getLevelName(console_level),
        log_dir or "-",
    )


def should_sample_log(key: str, sample_rate: int = 100) -> bool:
    """
    Rate-limit a repeated message: True on the 1st, (N+1)th, (2N+1)th...
    occurrence of ``key``.

    Args:
        key: Identifies the message being rate limited
        sample_rate: Emit one message per this many occurrences
    """
    _LOG_SAMPLING_STATE[key] += 1
    return (_LOG_SAMPLING_STATE[key] - 1) % sample_rate == 0
