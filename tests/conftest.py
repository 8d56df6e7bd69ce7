# ABOUTME: Shared fixtures for game data pipeline tests
# ABOUTME: Builds a small, internally consistent host snapshot covering every table

import copy
from collections.abc import Callable
from typing import Any

import pytest

from triad_ingest.core.context import LoadContext
from triad_ingest.host import InMemoryTableSource, build_table_source
from triad_ingest.parsers import PARSER_STAGES

RULE_NAMES = {host_id: f"Rule {host_id}" for host_id in range(16)}

HOST_SNAPSHOT: dict[str, list[dict[str, Any]]] = {
    "TripleTriadRule": [{"row_id": host_id, "name": name} for host_id, name in RULE_NAMES.items()],
    "TripleTriadCardType": [
        {"row_id": 0, "name": ""},
        {"row_id": 1, "name": "Primal"},
        {"row_id": 2, "name": "Scion"},
        {"row_id": 3, "name": "Beastman"},
        {"row_id": 4, "name": "Garlean"},
    ],
    "TripleTriadCardRarity": [{"row_id": row_id, "stars": max(row_id, 1)} for row_id in range(6)],
    "TripleTriadCardResident": [
        {"row_id": 0, "top": 0},
        {"row_id": 1, "top": 1, "bottom": 2, "left": 3, "right": 4, "card_type": 1, "card_rarity": 1, "sort_key": 10},
        {"row_id": 2, "top": 4, "bottom": 3, "left": 2, "right": 1, "card_type": 0, "card_rarity": 2, "sale_value": 5},
        {"row_id": 3, "top": 0, "bottom": 9, "left": 9, "right": 9},
        {"row_id": 4, "top": 5, "bottom": 5, "left": 5, "right": 5, "card_type": 2, "card_rarity": 5, "order": 3},
        {"row_id": 5, "top": 6, "bottom": 2, "left": 3, "right": 7, "card_type": 3, "card_rarity": 3},
    ],
    "TripleTriadCard": [
        {"row_id": 0, "name": ""},
        {"row_id": 1, "name": "Dodo"},
        {"row_id": 2, "name": "Tonberry"},
        {"row_id": 3, "name": ""},
        {"row_id": 4, "name": "Ifrit"},
        {"row_id": 5, "name": "Sabotender"},
    ],
    "TripleTriad": [
        {"row_id": 0},
        {
            "row_id": 10,
            "rules": [1, 0],
            "fixed_cards": [1, 2, 0, 0, 0],
            "variable_cards": [4, 5, 0, 0, 0],
            "fee": 100,
            "reward_items": [2001, 2002],
        },
        {
            "row_id": 11,
            "rules": [],
            "fixed_cards": [4, 0, 0, 0, 0],
            "fee": 0,
            "reward_items": [2003, 0],
        },
        {"row_id": 12, "fixed_cards": [0, 0, 0, 0, 0], "variable_cards": [0, 0, 0, 0, 0]},
        {"row_id": 13, "fixed_cards": [5, 0, 0, 0, 0], "fee": 40, "reward_items": [2001]},
    ],
    "ENpcBase": [
        {"row_id": 1001, "data_links": [0, 10]},
        {"row_id": 1002, "data_links": [11, 5]},
        {"row_id": 1003, "data_links": [12]},
        {"row_id": 1004, "data_links": [13]},
        {"row_id": 1005, "data_links": [10]},
        {"row_id": 1006, "data_links": [777]},
    ],
    "ENpcResident": [
        {"row_id": 1001, "singular": "Triple Triad Master"},
        {"row_id": 1002, "singular": "Wymond"},
        {"row_id": 1003, "singular": "Idle Imp"},
        {"row_id": 1004, "singular": "Roaming Merchant"},
        {"row_id": 1005, "singular": "Impostor"},
        {"row_id": 1006, "singular": "Bystander"},
    ],
    "TripleTriadResident": [
        {"row_id": 10, "order": 3},
        {"row_id": 13, "order": 7},
    ],
    "Level": [
        {
            "row_id": 1,
            "type": 8,
            "object_id": 1001,
            "x": 100.0,
            "y": 5.0,
            "z": -200.0,
            "map_id": 50,
            "territory_id": 130,
        },
        {"row_id": 2, "type": 8, "object_id": 1002, "x": 0.0, "y": 0.0, "z": 0.0, "map_id": 51, "territory_id": 131},
        {"row_id": 3, "type": 1, "object_id": 1004, "x": 1.0, "y": 1.0, "z": 1.0, "map_id": 50, "territory_id": 130},
    ],
    "Map": [
        {"row_id": 50, "offset_x": -10, "offset_y": 20, "size_factor": 200},
        {"row_id": 51, "offset_x": 0, "offset_y": 0, "size_factor": 100},
    ],
    "Item": [
        {"row_id": 2001, "additional_data": 4},
        {"row_id": 2002, "additional_data": 5},
        {"row_id": 2003, "additional_data": 99},
    ],
}


@pytest.fixture
def host_snapshot() -> dict[str, list[dict[str, Any]]]:
    """Raw host tables, safe to modify per test."""
    return copy.deepcopy(HOST_SNAPSHOT)


@pytest.fixture
def table_source(host_snapshot) -> InMemoryTableSource:
    """Table source serving the default host snapshot."""
    return build_table_source(host_snapshot)


@pytest.fixture
def load_context(table_source) -> LoadContext:
    """Fresh load context over the default host snapshot."""
    return LoadContext(source=table_source)


@pytest.fixture
def run_stages() -> Callable[..., LoadContext]:
    """Run parser stages in pipeline order up to and including the named stage."""

    def _run(ctx: LoadContext, until: str) -> LoadContext:
        for stage_name, stage in PARSER_STAGES:
            stage(ctx)
            if stage_name == until:
                break
        return ctx

    return _run
