# ABOUTME: Logging configuration, progress tracking, and output formatting
# ABOUTME: Provides structured logging for the scrape pipeline and a spinner for the CLI

from .config import LoggingMode, configure_logging, get_logging_status
from .progress import SimpleProgressTracker, create_smart_progress
from .utils import get_logger, log_page_fetch, with_pipeline_context

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "get_logging_status",
    # Progress
    "SimpleProgressTracker",
    "create_smart_progress",
    # Utilities
    "get_logger",
    "log_page_fetch",
    "with_pipeline_context",
]
