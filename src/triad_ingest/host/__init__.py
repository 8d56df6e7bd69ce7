# ABOUTME: Host data access layer
# ABOUTME: Row schemas, table protocols and snapshot loading for the host's static tables

"""
Host Layer: read-only access to the host application's tables

This layer handles:
- Typed row models for each fixed host schema
- The table source protocol the pipeline depends on
- In-memory tables and JSON snapshots for offline runs

Data Flow: host application → HostTable rows → parsers/
"""

from .rows import (
    ROW_MODELS,
    CardNameRow,
    CardRarityRow,
    CardStatsRow,
    CardTypeRow,
    HostRow,
    HostTableName,
    ItemRow,
    MapRow,
    NpcBaseRow,
    NpcNameRow,
    OpponentAchievementRow,
    OpponentRow,
    PlacementRow,
    RuleRow,
)
from .snapshot import build_table_source, load_snapshot
from .tables import HostTable, InMemoryTable, InMemoryTableSource, TableSource

__all__ = [
    "ROW_MODELS",
    "CardNameRow",
    "CardRarityRow",
    "CardStatsRow",
    "CardTypeRow",
    "HostRow",
    "HostTable",
    "HostTableName",
    "InMemoryTable",
    "InMemoryTableSource",
    "ItemRow",
    "MapRow",
    "NpcBaseRow",
    "NpcNameRow",
    "OpponentAchievementRow",
    "OpponentRow",
    "PlacementRow",
    "RuleRow",
    "TableSource",
    "build_table_source",
    "load_snapshot",
]
