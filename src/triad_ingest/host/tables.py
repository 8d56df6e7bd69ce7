# ABOUTME: Protocol interfaces for host table access plus an in-memory implementation
# ABOUTME: The pipeline depends only on these protocols, never on a concrete host client

from collections.abc import Iterable, Iterator
from typing import Protocol

from triad_ingest.host.rows import HostRow, HostTableName


class HostTable[RowT: HostRow](Protocol):
    """Read-only table of host rows identified by numeric id.

    Iteration yields rows in ascending row id order. Implementations backed by a live
    host may raise from any method when accessed concurrently.
    """

    @property
    def row_count(self) -> int: ...

    def get_row(self, row_id: int) -> RowT | None: ...

    def __iter__(self) -> Iterator[RowT]: ...


class TableSource(Protocol):
    """Capability to look up host tables by their fixed schema name."""

    def get_table(self, name: HostTableName) -> HostTable | None:
        """Return the table, or None when the host does not provide it."""
        ...


class InMemoryTable[RowT: HostRow]:
    """Host table held in a dict keyed by row id."""

    def __init__(self, rows: Iterable[RowT] = ()):
        self._rows: dict[int, RowT] = {}
        for row in rows:
            if row.row_id in self._rows:
                raise ValueError(f"Duplicate row id {row.row_id}")
            self._rows[row.row_id] = row

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def get_row(self, row_id: int) -> RowT | None:
        return self._rows.get(row_id)

    def __iter__(self) -> Iterator[RowT]:
        for row_id in sorted(self._rows):
            yield self._rows[row_id]

    def __len__(self) -> int:
        return len(self._rows)


class InMemoryTableSource:
    """Table source serving a fixed set of in-memory tables."""

    def __init__(self, tables: dict[HostTableName, HostTable] | None = None):
        self._tables: dict[HostTableName, HostTable] = dict(tables or {})

    def get_table(self, name: HostTableName) -> HostTable | None:
        return self._tables.get(name)

    def set_table(self, name: HostTableName, rows: Iterable[HostRow]) -> None:
        self._tables[name] = InMemoryTable(rows)

    def remove_table(self, name: HostTableName) -> None:
        self._tables.pop(name, None)

    @property
    def table_names(self) -> list[HostTableName]:
        return sorted(self._tables)
