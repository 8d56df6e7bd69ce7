# ABOUTME: Logging configuration, progress tracking, and structured logger helpers
# ABOUTME: Provides loguru sinks and structlog loggers for the game data pipeline

from .config import LoggingMode, configure_logging, get_logging_status
from .progress import SimpleProgressTracker, create_smart_progress
from .utils import get_logger, log_stage, with_pipeline_context

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
    "log_stage",
    "with_pipeline_context",
]
