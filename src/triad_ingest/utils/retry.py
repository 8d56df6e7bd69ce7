# ABOUTME: Bounded retry policy for game data loads using tenacity
# ABOUTME: Fixed delay between attempts, every exception is treated as transient

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from triad_ingest.config import get_config
from triad_ingest.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RetryPolicy:
    """How many times a load is attempted and how long to wait in between.

    Budget and delay default to the current Config. The host gives no fault
    classification, so by default any exception is retried.
    """

    max_attempts: int = field(default_factory=lambda: get_config().max_attempts)
    delay_seconds: float = field(default_factory=lambda: get_config().retry_delay_seconds)
    retry_on: tuple[type[BaseException], ...] = (Exception,)

    @classmethod
    def from_config(cls) -> "RetryPolicy":
        return cls()


def _log_before_sleep(retry_state: RetryCallState) -> None:
    """Tenacity hook, runs after a failed attempt when another one is coming."""
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Game data load attempt failed, retrying",
        attempt=retry_state.attempt_number,
        error=str(error),
        error_type=type(error).__name__ if error else None,
        delay_seconds=retry_state.upcoming_sleep,
    )


def build_retrying(
    policy: RetryPolicy, sleep: Callable[[float], Awaitable[None]] | None = None
) -> AsyncRetrying:
    """Create the tenacity controller for one load run.

    Args:
        policy: Retry policy to apply
        sleep: Optional coroutine used to wait between attempts, asyncio.sleep when omitted

    Returns:
        AsyncRetrying instance that reraises the last error when the budget is spent
    """
    kwargs = {"sleep": sleep} if sleep is not None else {}
    return AsyncRetrying(
        stop=stop_after_attempt(policy.max_attempts),
        wait=wait_fixed(policy.delay_seconds),
        retry=retry_if_exception_type(policy.retry_on),
        before_sleep=_log_before_sleep,
        reraise=True,
        **kwargs,
    )
