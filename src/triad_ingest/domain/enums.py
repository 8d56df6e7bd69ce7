# ABOUTME: Enumerations used by the card game domain model
# ABOUTME: Card types, rarities and rule kinds in this system's own ordering

from enum import Enum


class CardType(str, Enum):
    """Card type, NONE for cards without one."""

    NONE = "none"
    PRIMAL = "primal"
    SCION = "scion"
    BEASTMAN = "beastman"
    GARLEAN = "garlean"


class CardRarity(str, Enum):
    """Card rarity, from one star (COMMON) to five (LEGENDARY)."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


class RuleKind(str, Enum):
    """Match rule modifiers, listed in logic order.

    Position in this enum is the rule's logic index. The host orders its rule table
    differently, see RULE_LOGIC_TO_HOST.
    """

    NONE = "none"
    ROULETTE = "roulette"
    ALL_OPEN = "all_open"
    THREE_OPEN = "three_open"
    SUDDEN_DEATH = "sudden_death"
    REVERSE = "reverse"
    FALLEN_ACE = "fallen_ace"
    SAME = "same"
    PLUS = "plus"
    ASCENSION = "ascension"
    DESCENSION = "descension"
    ORDER = "order"
    CHAOS = "chaos"
    SWAP = "swap"
    RANDOM = "random"
    DRAFT = "draft"
