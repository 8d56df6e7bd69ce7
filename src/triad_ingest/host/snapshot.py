# ABOUTME: Loads a JSON dump of host tables into an in-memory table source
# ABOUTME: Used by the CLI and tests to feed the pipeline without a live host

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from triad_ingest.host.rows import ROW_MODELS, HostTableName
from triad_ingest.host.tables import InMemoryTableSource
from triad_ingest.utils.logging import get_logger

logger = get_logger(__name__)


def build_table_source(data: dict[str, list[dict[str, Any]]]) -> InMemoryTableSource:
    """Validate raw table rows and wrap them in a table source.

    Args:
        data: Mapping of host table name to a list of row dicts

    Returns:
        Table source holding every known table found in data

    Raises:
        pydantic.ValidationError: If a row does not match its table's schema
    """
    source = InMemoryTableSource()

    for raw_name, rows in data.items():
        try:
            name = HostTableName(raw_name)
        except ValueError:
            logger.debug("Ignoring unknown host table", table=raw_name)
            continue

        adapter = TypeAdapter(list[ROW_MODELS[name]])  # type: ignore[valid-type]
        source.set_table(name, adapter.validate_python(rows))

    return source


def load_snapshot(path: Path) -> InMemoryTableSource:
    """Load a host snapshot from a JSON file.

    Args:
        path: JSON file holding an object of {table_name: [row, ...]}

    Returns:
        Table source with the snapshot's tables

    Raises:
        FileNotFoundError: If the snapshot file doesn't exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Host snapshot not found at {path}")

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    source = build_table_source(data)
    logger.info("Loaded host snapshot", path=str(path), tables=len(source.table_names))
    return source
