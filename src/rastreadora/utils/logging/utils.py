# ABOUTME: Logger utilities with context binding and request tracking decorators
# ABOUTME: Provides get_logger function and decorators for consistent structured logging

import functools
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

import structlog

# Type variable for decorated functions
F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance with automatic module detection.

    Args:
        name: Logger name, auto-detected from caller if None

    Returns:
        Configured structlog logger instance
    """
    if name is None:
        import inspect

        frame = inspect.currentframe()
        if frame and frame.f_back:
            # Get the module name of the caller
            name = frame.f_back.f_globals.get("__name__", "unknown")

    name = name or "rastreadora"
    return structlog.get_logger(name, logger_name=name)


def generate_operation_id() -> str:
    """Generate a unique operation ID for tracking requests."""
    return str(uuid.uuid4())[:8]


def log_page_fetch(func: F) -> F:
    """Decorator to log HTTP page retrievals with timing details.

    The wrapped coroutine must take the URL as its first positional argument
    after ``self``. Failures are logged at debug level and re-raised; deciding
    whether a failure matters is left to the caller.
    """

    @functools.wraps(func)
    async def wrapper(self, url: str, *args, **kwargs):
        bound_logger = get_logger(func.__module__).bind(url=url, call_id=generate_operation_id())

        bound_logger.debug("Fetching page")
        start_time = time.time()

        try:
            result = await func(self, url, *args, **kwargs)
        except Exception as e:
            bound_logger.debug(
                "Page fetch failed",
                duration_seconds=round(time.time() - start_time, 3),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        bound_logger.debug("Page fetched", duration_seconds=round(time.time() - start_time, 3))
        return result

    return wrapper  # type: ignore[return-value]


class LogContext:
    """Context manager for binding logger context."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, **context):
        self.logger = logger
        self.context = context
        self.bound_logger = None

    def __enter__(self) -> structlog.stdlib.BoundLogger:
        self.bound_logger = self.logger.bind(**self.context)
        return self.bound_logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None and self.bound_logger is not None:
            self.bound_logger.error("Context operation failed", error=str(exc_val), error_type=exc_type.__name__)


def with_pipeline_context(pipeline_name: str, **context) -> LogContext:
    """Create a logging context for pipeline operations.

    Args:
        pipeline_name: Name of the pipeline
        **context: Additional context to bind

    Returns:
        LogContext manager with pipeline context
    """
    logger = get_logger()
    operation_id = generate_operation_id()
    return LogContext(logger, pipeline=pipeline_name, operation_id=operation_id, **context)
