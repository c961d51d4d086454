"""
Timing decorator for slow paths such as domain sampling.
"""

import functools
import logging
import time
from typing import Any, Callable, Optional, TypeVar, cast

from fuzzyvis.logging.config import get_logger

F = TypeVar("F", bound=Callable[..., Any])


def log_performance(
    logger: Optional[logging.Logger] = None,
    threshold_ms: float = 0,
    log_level: int = logging.DEBUG,
) -> Callable[[F], F]:
    """
    Log how long each call of the decorated function takes.

    Args:
        logger: Destination logger; defaults to the function's module logger
        threshold_ms: Calls faster than this are not logged (0 logs every call)
        log_level: Level of the timing message

    Returns:
        Decorator that preserves the wrapped function's signature
    """

    def decorator(func: F) -> F:
        log = logger or get_logger(func.__module__)

        @functools.wraps(func)
        def timed(*args: Any, **kwargs: Any) -> Any:
            started = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed_ms = (time.perf_counter() - started) * 1000
                if elapsed_ms >= threshold_ms:
                    log.log(
                        log_level,
                        "Performance: %s took %.2fms",
                        func.__qualname__,
                        elapsed_ms,
                    )

        return cast(F, timed)

    return decorator
