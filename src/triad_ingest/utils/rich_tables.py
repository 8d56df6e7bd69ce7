# ABOUTME: Rich table utilities for displaying load results in the CLI
# ABOUTME: Provides pre-configured table generators for load summaries, opponents and diagnostics

from typing import Any

from rich.box import ROUNDED, SIMPLE
from rich.console import Console
from rich.table import Table

from triad_ingest.domain.catalogue import GameData
from triad_ingest.errors import Diagnostic, DiagnosticKind


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a key-value table.

    Args:
        title: Table title with emoji/styling
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, width=None, no_wrap=False)
    table.add_column("Value", style=value_style, width=None, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_multi_column_table(
    title: str,
    columns: list[tuple[str, str]],
    rows: list[list[str]],
    title_style: str = "bold cyan",
    header_style: str = "bold magenta",
    alternate_row_styles: list[str] | None = None,
    box_style=ROUNDED,
) -> Table:
    """Create a multi-column table.

    Args:
        title: Table title with emoji/styling
        columns: List of (column_name, column_style) tuples
        rows: List of row data
        title_style: Style for the table title
        header_style: Style for column headers
        alternate_row_styles: Alternating row styles for zebra striping
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style=header_style,
        border_style="cyan",
        title_justify="left",
        row_styles=alternate_row_styles or ["", "dim"],
        expand=True,
    )

    for name, style in columns:
        table.add_column(name, style=style)

    for row in rows:
        table.add_row(*row)

    return table


def create_load_summary_table(report: Any) -> Table:
    """Create a summary table for a finished load.

    Args:
        report: LoadReport from GameDataLoader.load

    Returns:
        Status table with color coded outcome
    """
    if report.is_ready:
        outcome = "[bold green]✅ Ready[/bold green]"
    else:
        outcome = "[bold red]❌ Not ready[/bold red]"

    summary_data = {
        "📊 State": outcome,
        "🔁 Attempts": str(report.attempts),
        "🃏 Cards": str(report.cards),
        "🧑 Opponents": str(report.opponents),
        "⚠️ Diagnostics": str(len(report.diagnostics)),
    }
    if report.error:
        summary_data["🚨 Last Error"] = f"{report.error_type}: {report.error}"

    return create_key_value_table(
        title="🔄 Game Data Load",
        data=summary_data,
        title_style="bold green" if report.is_ready else "bold red",
        key_style="cyan",
        value_style="white",
        box_style=SIMPLE,
    )


def create_opponents_table(data: GameData, limit: int | None = None) -> Table:
    """Create a table listing finalized opponents with their location and rewards."""
    columns = [
        ("#", "cyan"),
        ("Name", "bold white"),
        ("Rules", "magenta"),
        ("Fee", "yellow"),
        ("Location", "green"),
        ("Rewards", "blue"),
    ]

    rows = []
    opponents = data.opponents if limit is None else data.opponents[:limit]
    for index, opponent in enumerate(opponents):
        info = data.opponent_infos.get(index)
        location = "[dim]Unknown[/dim]"
        if info and info.location:
            location = f"map {info.location.map_id} ({info.location.x:.1f}, {info.location.y:.1f})"

        rewards = []
        for card_id in info.reward_cards if info else []:
            card = data.cards.find_by_id(card_id)
            rewards.append(card.name if card else str(card_id))

        rows.append(
            [
                str(index),
                opponent.name,
                ", ".join(rule.localized_name or rule.kind.value for rule in opponent.rules) or "-",
                str(info.match_fee) if info else "-",
                location,
                ", ".join(rewards) or "-",
            ]
        )

    return create_multi_column_table(title="🧑 Opponents", columns=columns, rows=rows)


def create_diagnostics_table(diagnostics: list[Diagnostic]) -> Table:
    """Create a table of non-fatal problems found while loading."""
    styles = {
        DiagnosticKind.REFERENCE_WARNING: "[yellow]reference[/yellow]",
        DiagnosticKind.CROSS_REFERENCE_MISMATCH: "[red]cross reference[/red]",
        DiagnosticKind.MISSING_ACHIEVEMENT: "[dim]achievement[/dim]",
    }
    rows = [[styles[diagnostic.kind], diagnostic.message] for diagnostic in diagnostics]

    return create_multi_column_table(
        title="⚠️ Diagnostics",
        columns=[("Kind", "white"), ("Message", "white")],
        rows=rows,
        title_style="bold yellow",
    )


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a logging configuration status table.

    Args:
        status: Logging status dictionary

    Returns:
        Styled logging configuration table
    """
    logging_data = {
        "🔧 Mode": status["mode"].title(),
        "📁 Log Directory": status["log_directory"] or "N/A (production mode)",
        "🔇 Suppressed Libraries": ", ".join(status["third_party_suppressed"]),
    }

    if status["log_files"]["main"]:
        logging_data["📝 Main Log"] = status["log_files"]["main"]
    if status["log_files"]["json"]:
        logging_data["📊 JSON Log"] = status["log_files"]["json"]
    if status["log_files"]["errors"]:
        logging_data["🚨 Error Log"] = status["log_files"]["errors"]

    return create_key_value_table(
        title="🔍 Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing.

    Args:
        console: Rich console instance
        table: Configured table to print
    """
    console.print()
    console.print(table)
    console.print()
