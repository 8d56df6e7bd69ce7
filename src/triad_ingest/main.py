# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands for loading a host snapshot and inspecting logging config

from pathlib import Path

import asyncclick as click
from pydantic import ValidationError
from rich.console import Console

from triad_ingest.config import get_config
from triad_ingest.core.pipeline import GameDataLoader, LoadReport
from triad_ingest.core.store import GameDataStore
from triad_ingest.host import load_snapshot
from triad_ingest.utils.logging import (
    LoggingMode,
    configure_logging,
    create_smart_progress,
    get_logger,
    get_logging_status,
)
from triad_ingest.utils.retry import RetryPolicy
from triad_ingest.utils.rich_tables import (
    create_diagnostics_table,
    create_load_summary_table,
    create_logging_status_table,
    create_opponents_table,
    print_rich_table,
)

console = Console()


def _display_load_results(report: LoadReport, store: GameDataStore, show_opponents: bool, limit: int | None):
    print_rich_table(console, create_load_summary_table(report))

    if report.diagnostics:
        print_rich_table(console, create_diagnostics_table(report.diagnostics))

    if show_opponents and store.is_ready:
        print_rich_table(console, create_opponents_table(store.data, limit=limit))


@click.command()
@click.argument("snapshot", type=click.Path(path_type=Path))
@click.option("--max-attempts", type=click.IntRange(min=1), help="Override total load attempts")
@click.option("--retry-delay", type=click.FloatRange(min=0.0), help="Override seconds between attempts")
@click.option("--opponents", "show_opponents", is_flag=True, help="List loaded opponents")
@click.option("--limit", type=click.IntRange(min=1), help="Max opponents to list")
@click.pass_context
async def load(
    ctx,
    snapshot: Path,
    max_attempts: int | None,
    retry_delay: float | None,
    show_opponents: bool,
    limit: int | None,
):
    """
    🃏 Load game data from a host table snapshot.

    SNAPSHOT is a JSON file mapping host table names to lists of rows.
    Exits non-zero when every attempt fails.
    """
    json_output = ctx.obj["json_output"]
    logger = get_logger(__name__)

    try:
        source = load_snapshot(snapshot)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        logger.error("Could not read host snapshot", path=str(snapshot), error=str(e))
        if not json_output:
            console.print(f"[red]❌ Could not read snapshot: {e}[/red]")
        ctx.exit(2)

    config = get_config()
    policy = RetryPolicy(
        max_attempts=max_attempts or config.max_attempts,
        delay_seconds=config.retry_delay_seconds if retry_delay is None else retry_delay,
    )
    store = GameDataStore()
    loader = GameDataLoader(store=store, policy=policy)

    if json_output:
        report = await loader.load(source)
    else:
        progress, _, tracker = create_smart_progress(console)
        with progress, tracker:
            tracker.update(f"🃏 Loading game data from {snapshot.name}...")
            report = await loader.load(source)
        _display_load_results(report, store, show_opponents, limit)

    if not report.is_ready:
        if not json_output:
            console.print(f"[red]❌ Game data not ready after {report.attempts} attempts[/red]")
        ctx.exit(1)


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    try:
        config = get_config()
        mode = LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE

        final_log_level = log_level or config.log_level
        final_log_file = log_file or (str(config.log_file) if config.log_file else None)

        configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)
    except (FileNotFoundError, PermissionError, OSError):
        # Log directory can vanish under parallel test runs
        mode = LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE
        configure_logging(mode=mode, log_level=log_level or "INFO", log_file=log_file)


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    logging_table = create_logging_status_table(status)
    print_rich_table(console, logging_table)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output structured JSON logs instead of rich interface")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    🃏 Triad Ingest - Triple Triad game data loader

    Reads the host game's card, rule and opponent tables into consistent
    in-memory catalogues.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    _initialize_logging(json, log_level, log_file)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(load)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
