# ABOUTME: Logging configuration using loguru sinks fed by structlog loggers
# ABOUTME: Dual-mode operation: interactive CLI (log files) vs production JSON logging on stderr

import logging
import os
import sys
import time
from pathlib import Path
from typing import Any

import structlog
from loguru import logger


class LoggingMode:
    """Logging mode constants."""

    INTERACTIVE = "interactive"
    PRODUCTION = "production"


LOG_DIR = Path("logs")

# Libraries whose chatter would drown the per-page events
THIRD_PARTY_LOGGERS = ["httpx", "httpcore", "urllib3", "asyncio", "charset_normalizer"]

_STRUCTLOG_LEVELS = {
    "debug": "DEBUG",
    "info": "INFO",
    "msg": "INFO",
    "warn": "WARNING",
    "warning": "WARNING",
    "error": "ERROR",
    "exception": "ERROR",
    "critical": "CRITICAL",
    "fatal": "CRITICAL",
}


def detect_logging_mode() -> str:
    """Detect whether we're running in interactive or production mode."""
    mode = os.getenv("RASTREADORA_LOG_MODE")
    if mode and mode.lower() in [LoggingMode.INTERACTIVE, LoggingMode.PRODUCTION]:
        return mode.lower()

    return LoggingMode.INTERACTIVE if sys.stderr.isatty() else LoggingMode.PRODUCTION


def setup_third_party_logging() -> None:
    """Configure third-party library logging to avoid CLI interference."""
    for logger_name in THIRD_PARTY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(logging.ERROR)


def forward_to_loguru(_: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor handing every event to loguru, context bound as ``extra``."""
    event = str(event_dict.pop("event", ""))
    level = _STRUCTLOG_LEVELS.get(method_name, "INFO")
    logger.bind(**event_dict).log(level, event)
    raise structlog.DropEvent


def setup_structlog() -> None:
    """Route structlog loggers into the loguru sinks."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.format_exc_info,
            forward_to_loguru,
        ],
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _ensure_log_dir(log_dir: Path) -> bool:
    # Robust directory creation with retry logic for race conditions
    max_retries = 3
    for attempt in range(max_retries):
        try:
            log_dir.mkdir(exist_ok=True)
            return True
        except OSError:
            if attempt == max_retries - 1:
                return False
            time.sleep(0.01 * (attempt + 1))  # 10ms, 20ms, 30ms
    return False


def configure_logging(mode: str | None = None, log_level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging using loguru.

    Standard output is reserved for the scraped data, so nothing is ever logged there.

    Args:
        mode: Logging mode (interactive/production), auto-detected if None
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Custom log file path, uses default if None
    """
    if mode is None:
        mode = detect_logging_mode()

    setup_third_party_logging()
    setup_structlog()

    # Set standard library logging level for compatibility with tests
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(numeric_level)

    # Remove default loguru handler
    logger.remove()

    if mode == LoggingMode.INTERACTIVE and not _ensure_log_dir(LOG_DIR):
        # Couldn't create the directory, fall back to production mode
        mode = LoggingMode.PRODUCTION

    if mode == LoggingMode.PRODUCTION:
        logger.add(sys.stderr, level=log_level, format="{time} | {level} | {message}", serialize=True)
        return

    log_file_path = log_file or str(LOG_DIR / "rastreadora.log")

    # Human-readable logs
    logger.add(
        log_file_path,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message} | {extra}",
        rotation="10 MB",
        retention="7 days",
    )

    # JSON logs for machine processing
    logger.add(
        LOG_DIR / "rastreadora.json",
        level=log_level,
        format="{time} | {level} | {message}",
        serialize=True,
        rotation="10 MB",
        retention="7 days",
    )

    # Errors only
    logger.add(
        LOG_DIR / "errors.log",
        level="ERROR",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message} | {extra}",
        backtrace=True,
        diagnose=True,
    )


def get_logging_status() -> dict[str, Any]:
    """Get current logging configuration status."""
    mode = detect_logging_mode()
    interactive = mode == LoggingMode.INTERACTIVE

    return {
        "mode": mode,
        "log_directory": str(LOG_DIR.absolute()) if LOG_DIR.exists() else None,
        "log_files": {
            "main": str(LOG_DIR / "rastreadora.log") if interactive else None,
            "json": str(LOG_DIR / "rastreadora.json") if interactive else None,
            "errors": str(LOG_DIR / "errors.log") if interactive else None,
        },
        "third_party_suppressed": [*THIRD_PARTY_LOGGERS, "py.warnings"],
    }
