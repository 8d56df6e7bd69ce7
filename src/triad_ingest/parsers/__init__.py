# ABOUTME: Host table parsers, one per pipeline stage
# ABOUTME: PARSER_STAGES lists them in the order the pipeline must run them

"""
Parser Layer: host tables → destination catalogues and transient cache

Each stage takes a LoadContext and either fills destination catalogues directly
(rules, card types, cards) or the transient opponent cache (opponents, achievements,
locations, rewards). Stages raise GameDataError subclasses on fatal problems.
"""

from collections.abc import Callable

from triad_ingest.core.context import LoadContext

from .achievements import parse_opponent_achievements
from .card_types import parse_card_types
from .cards import build_card, parse_cards
from .locations import PLACEMENT_TYPE_NPC, parse_opponent_locations
from .opponents import NpcIdentity, parse_opponents, resolve_npc_identities
from .rewards import parse_card_rewards
from .rules import parse_rules

# Later stages read what earlier ones built, the order is fixed
PARSER_STAGES: tuple[tuple[str, Callable[[LoadContext], None]], ...] = (
    ("rules", parse_rules),
    ("card_types", parse_card_types),
    ("cards", parse_cards),
    ("opponents", parse_opponents),
    ("opponent_achievements", parse_opponent_achievements),
    ("opponent_locations", parse_opponent_locations),
    ("card_rewards", parse_card_rewards),
)

__all__ = [
    "PARSER_STAGES",
    "PLACEMENT_TYPE_NPC",
    "NpcIdentity",
    "build_card",
    "parse_card_rewards",
    "parse_card_types",
    "parse_cards",
    "parse_opponent_achievements",
    "parse_opponent_locations",
    "parse_opponents",
    "parse_rules",
    "resolve_npc_identities",
]
