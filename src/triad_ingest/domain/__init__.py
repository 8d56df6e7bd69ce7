# ABOUTME: Card game domain model filled by the pipeline
# ABOUTME: Enumerations, fixed id mapping tables, coordinate conversion, records and catalogues

from .catalogue import CardCatalogue, GameData, LocalizationTable, RuleCatalogue
from .coords import convert_coord_to_human_readable, convert_map_position
from .enums import CardRarity, CardType, RuleKind
from .mappings import (
    CARD_RARITY_MAP,
    CARD_TYPE_MAP,
    RULE_HOST_TO_LOGIC,
    RULE_LOGIC_TO_HOST,
    convert_card_rarity,
    convert_card_type,
    validate_mapping_tables,
)
from .models import DECK_SLOTS, Card, CardInfo, GameRule, MapLink, Opponent, OpponentInfo

__all__ = [
    "CARD_RARITY_MAP",
    "CARD_TYPE_MAP",
    "DECK_SLOTS",
    "RULE_HOST_TO_LOGIC",
    "RULE_LOGIC_TO_HOST",
    "Card",
    "CardCatalogue",
    "CardInfo",
    "CardRarity",
    "CardType",
    "GameData",
    "GameRule",
    "LocalizationTable",
    "MapLink",
    "Opponent",
    "OpponentInfo",
    "RuleCatalogue",
    "RuleKind",
    "convert_card_rarity",
    "convert_card_type",
    "convert_coord_to_human_readable",
    "convert_map_position",
    "validate_mapping_tables",
]
