# ABOUTME: Load context handed to every parser stage during one attempt
# ABOUTME: Holds the table source, the arena being built, the transient cache and collected diagnostics

from dataclasses import dataclass, field
from typing import Any

from triad_ingest.config import get_config
from triad_ingest.core.cache import PipelineCache
from triad_ingest.domain.catalogue import GameData
from triad_ingest.errors import Diagnostic, DiagnosticKind, SchemaMismatchError
from triad_ingest.host import HostTable, HostTableName, TableSource
from triad_ingest.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class LoadContext:
    """State for a single load attempt. A fresh context is created per attempt."""

    source: TableSource
    data: GameData = field(default_factory=GameData)
    cache: PipelineCache = field(default_factory=PipelineCache)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    index_drift_slack: int = field(default_factory=lambda: get_config().index_drift_slack)

    def table(self, name: HostTableName) -> HostTable | None:
        return self.source.get_table(name)

    def require_table(self, name: HostTableName) -> HostTable:
        """Return a host table that the current stage cannot run without.

        Raises:
            SchemaMismatchError: If the host doesn't provide the table
        """
        table = self.source.get_table(name)
        if table is None:
            raise SchemaMismatchError(f"Missing host table {name.value}", table=name.value)
        return table

    def record(self, kind: DiagnosticKind, message: str, **context: Any) -> None:
        """Record and log a non-fatal problem."""
        self.diagnostics.append(Diagnostic(kind=kind, message=message, context=context))
        if kind == DiagnosticKind.MISSING_ACHIEVEMENT:
            logger.warning(message, diagnostic=kind.value, **context)
        else:
            logger.error(message, diagnostic=kind.value, **context)
