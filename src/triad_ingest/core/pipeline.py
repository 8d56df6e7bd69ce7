# ABOUTME: Game data loader orchestrating all parser stages with bounded retries
# ABOUTME: Each attempt builds a fresh GameData arena, only a fully successful attempt is published

import asyncio
import threading
from enum import Enum

from pydantic import BaseModel, Field

from triad_ingest.config import get_config
from triad_ingest.core.context import LoadContext
from triad_ingest.core.finalizer import finalize_opponents
from triad_ingest.core.store import GameDataStore, get_store
from triad_ingest.errors import Diagnostic
from triad_ingest.host import TableSource
from triad_ingest.parsers import PARSER_STAGES
from triad_ingest.utils.logging import get_logger, with_pipeline_context
from triad_ingest.utils.retry import RetryPolicy, build_retrying


class LoadState(str, Enum):
    """Loader lifecycle. FAILED goes back to RUNNING while attempts remain."""

    IDLE = "idle"
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"


class LoadReport(BaseModel):
    """Outcome of one load run, across all of its attempts."""

    state: LoadState
    attempts: int = Field(ge=0, description="Attempts made, including the successful one")
    cards: int = 0
    opponents: int = 0
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    error: str | None = None
    error_type: str | None = None

    @property
    def is_ready(self) -> bool:
        return self.state == LoadState.SUCCESS


class GameDataLoader:
    """Loads host tables into the game data store.

    Stages run strictly in PARSER_STAGES order inside a worker thread. Any exception
    aborts the attempt, discards everything it built, and is retried per the retry
    policy, since the host can't tell us which failures are transient.
    """

    def __init__(
        self,
        store: GameDataStore | None = None,
        policy: RetryPolicy | None = None,
        index_drift_slack: int | None = None,
    ):
        """Initialize the loader.

        Args:
            store: Store receiving the published data (defaults to the process-wide store)
            policy: Retry policy (defaults to values from config)
            index_drift_slack: Allowed card id drift (defaults to value from config)
        """
        config = get_config()
        self.store = store or get_store()
        self.policy = policy or RetryPolicy.from_config()
        self.index_drift_slack = config.index_drift_slack if index_drift_slack is None else index_drift_slack
        self.state = LoadState.IDLE
        self.attempts = 0
        self.report: LoadReport | None = None
        self.logger = get_logger(__name__)
        self._task: asyncio.Task[LoadReport] | None = None

    @property
    def is_ready(self) -> bool:
        return self.store.is_ready

    def run_attempt(self, source: TableSource) -> LoadContext:
        """Run every stage and the finalizer once against a fresh context.

        Returns:
            The finished context, its data is ready to publish

        Raises:
            GameDataError: On the first fatal problem found by a stage
        """
        ctx = LoadContext(source=source, index_drift_slack=self.index_drift_slack)

        for stage_name, stage in PARSER_STAGES:
            self.logger.debug("Running stage", stage=stage_name, attempt=self.attempts)
            stage(ctx)

        finalize_opponents(ctx)
        ctx.cache.clear()
        return ctx

    async def _run_attempt_in_thread(self, source: TableSource) -> LoadContext:
        self.attempts += 1
        self.state = LoadState.RUNNING
        try:
            return await asyncio.to_thread(self.run_attempt, source)
        except Exception:
            self.state = LoadState.FAILED
            raise

    async def load(self, source: TableSource) -> LoadReport:
        """Load game data, retrying failed attempts until the policy's budget is spent.

        The store is reset first and only published after a successful attempt. On
        exhaustion it stays not ready with empty catalogues.

        Args:
            source: Host table source

        Returns:
            LoadReport describing the outcome
        """
        self.store.reset()
        self.attempts = 0
        self.state = LoadState.IDLE

        with with_pipeline_context("game_data", max_attempts=self.policy.max_attempts) as logger:
            try:
                async for attempt in build_retrying(self.policy):
                    with attempt:
                        ctx = await self._run_attempt_in_thread(source)
            except Exception as e:
                self.state = LoadState.FAILED
                self.report = LoadReport(
                    state=self.state, attempts=self.attempts, error=str(e), error_type=type(e).__name__
                )
                logger.error(
                    "Game data load failed, giving up",
                    attempts=self.attempts,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return self.report

            self.store.publish(ctx.data)
            self.state = LoadState.SUCCESS
            self.report = LoadReport(
                state=self.state,
                attempts=self.attempts,
                cards=ctx.data.cards.card_count,
                opponents=len(ctx.data.opponents),
                diagnostics=ctx.diagnostics,
            )
            logger.info(
                "Loaded game data",
                cards=self.report.cards,
                opponents=self.report.opponents,
                attempts=self.attempts,
                diagnostics=len(ctx.diagnostics),
            )
            return self.report

    def start(self, source: TableSource) -> asyncio.Task[LoadReport]:
        """Schedule load() as a background task on the running event loop."""
        self._task = asyncio.create_task(self.load(source), name="game-data-load")
        return self._task

    def start_thread(self, source: TableSource) -> threading.Thread:
        """Run load() on its own thread and event loop, for callers without a loop."""
        thread = threading.Thread(target=lambda: asyncio.run(self.load(source)), name="game-data-load", daemon=True)
        thread.start()
        return thread
