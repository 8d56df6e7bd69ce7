# ABOUTME: Tests for the CLI rich table builders
# ABOUTME: Validates load summary, opponent and diagnostic tables render with expected content

import asyncio

from rich.console import Console

from triad_ingest.core.pipeline import GameDataLoader, LoadReport, LoadState
from triad_ingest.core.store import GameDataStore
from triad_ingest.errors import Diagnostic, DiagnosticKind
from triad_ingest.utils.retry import RetryPolicy
from triad_ingest.utils.rich_tables import (
    create_diagnostics_table,
    create_key_value_table,
    create_load_summary_table,
    create_opponents_table,
)


def render(table) -> str:
    console = Console(width=200, record=True)
    console.print(table)
    return console.export_text()


class TestTables:
    """Test table builders."""

    def test_key_value_table(self):
        """Test a simple key-value table."""
        table = create_key_value_table("Title", {"Cards": "4"})

        assert table.row_count == 1
        assert "Cards" in render(table)

    def test_load_summary_failed(self):
        """Test that a failed report shows its last error."""
        report = LoadReport(state=LoadState.FAILED, attempts=4, error="boom", error_type="RuntimeError")

        output = render(create_load_summary_table(report))

        assert "Not ready" in output
        assert "RuntimeError: boom" in output

    def test_load_summary_ready(self):
        """Test a ready report."""
        report = LoadReport(state=LoadState.SUCCESS, attempts=1, cards=4, opponents=2)

        table = create_load_summary_table(report)

        assert table.row_count == 5
        assert "Ready" in render(table)

    def test_opponents_table(self, table_source):
        """Test listing loaded opponents with their rewards."""
        store = GameDataStore()
        asyncio.run(GameDataLoader(store=store, policy=RetryPolicy(delay_seconds=0)).load(table_source))

        output = render(create_opponents_table(store.data))

        assert "Triple Triad Master" in output
        assert "Ifrit, Sabotender" in output
        assert "map 51" in output

    def test_opponents_table_limit(self, table_source):
        """Test truncating the opponent list."""
        store = GameDataStore()
        asyncio.run(GameDataLoader(store=store, policy=RetryPolicy(delay_seconds=0)).load(table_source))

        assert create_opponents_table(store.data, limit=1).row_count == 1

    def test_diagnostics_table(self):
        """Test one row per diagnostic."""
        diagnostics = [
            Diagnostic(kind=DiagnosticKind.REFERENCE_WARNING, message="reward gone"),
            Diagnostic(kind=DiagnosticKind.MISSING_ACHIEVEMENT, message="no order"),
        ]

        table = create_diagnostics_table(diagnostics)

        assert table.row_count == 2
        assert "reward gone" in render(table)
