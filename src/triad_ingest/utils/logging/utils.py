# ABOUTME: Logger utilities with context binding and pipeline stage tracking decorators
# ABOUTME: Provides get_logger function and decorators for consistent structured logging

import functools
import inspect
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
        frame = inspect.currentframe()
        if frame and frame.f_back:
            # Get the module name of the caller
            name = frame.f_back.f_globals.get("__name__", "unknown")

    return structlog.get_logger(name or "triad_ingest")


def generate_operation_id() -> str:
    """Generate a unique operation ID for tracking a load run."""
    return str(uuid.uuid4())[:8]


def log_stage(stage_name: str) -> Callable[[F], F]:
    """Decorator to log a pipeline parser stage.

    Logs start, completion with duration, and failures with the error type. The
    exception is re-raised untouched so the orchestrator can decide what to do.

    Args:
        stage_name: Name of the pipeline stage

    Returns:
        Decorated function with stage logging
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            bound_logger = get_logger(func.__module__).bind(stage=stage_name, pipeline="game_data")

            bound_logger.debug(f"Starting stage: {stage_name}")
            start_time = time.time()

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                bound_logger.error(
                    f"Failed stage: {stage_name}",
                    duration_seconds=round(time.time() - start_time, 3),
                    error=str(e),
                    error_type=type(e).__name__,
                    success=False,
                )
                raise

            bound_logger.debug(
                f"Completed stage: {stage_name}",
                duration_seconds=round(time.time() - start_time, 3),
                success=True,
            )
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


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
