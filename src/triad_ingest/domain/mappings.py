# ABOUTME: Hand-maintained tables translating host ids into this system's enumerations
# ABOUTME: Fixed contracts, validated on import; never inferred from host data

from triad_ingest.domain.enums import CardRarity, CardType, RuleKind

# Host card type row id -> CardType
CARD_TYPE_MAP: tuple[CardType, ...] = (
    CardType.NONE,
    CardType.PRIMAL,
    CardType.SCION,
    CardType.BEASTMAN,
    CardType.GARLEAN,
)

# Host card rarity row id -> CardRarity. Rows 0 and 1 are both one star.
CARD_RARITY_MAP: tuple[CardRarity, ...] = (
    CardRarity.COMMON,
    CardRarity.COMMON,
    CardRarity.UNCOMMON,
    CardRarity.RARE,
    CardRarity.EPIC,
    CardRarity.LEGENDARY,
)

# Rule logic index (RuleKind order) -> host rule row id
RULE_LOGIC_TO_HOST: tuple[int, ...] = (0, 1, 2, 3, 5, 10, 11, 4, 6, 12, 13, 8, 9, 14, 7, 15)

EXPECTED_CARD_RARITY_ROWS = 6


def validate_mapping_tables() -> None:
    """Check the fixed tables against the enumerations they translate into.

    Raises:
        RuntimeError: If a table has the wrong length or the rule table is not a permutation
    """
    if len(CARD_TYPE_MAP) != len(CardType) or set(CARD_TYPE_MAP) != set(CardType):
        raise RuntimeError(f"Card type map must cover all {len(CardType)} card types")

    if len(CARD_RARITY_MAP) != EXPECTED_CARD_RARITY_ROWS or set(CARD_RARITY_MAP) != set(CardRarity):
        raise RuntimeError(f"Card rarity map must have {EXPECTED_CARD_RARITY_ROWS} entries covering all rarities")

    if sorted(RULE_LOGIC_TO_HOST) != list(range(len(RuleKind))):
        raise RuntimeError(f"Rule map must be a permutation of 0..{len(RuleKind) - 1}")


validate_mapping_tables()

# Host rule row id -> rule logic index
RULE_HOST_TO_LOGIC: tuple[int, ...] = tuple(
    sorted(range(len(RULE_LOGIC_TO_HOST)), key=lambda logic_idx: RULE_LOGIC_TO_HOST[logic_idx])
)


def convert_card_type(raw_type: int) -> CardType:
    """Map a host card type id, unknown ids become CardType.NONE."""
    return CARD_TYPE_MAP[raw_type] if 0 <= raw_type < len(CARD_TYPE_MAP) else CardType.NONE


def convert_card_rarity(raw_rarity: int) -> CardRarity:
    """Map a host card rarity id, unknown ids become CardRarity.COMMON."""
    return CARD_RARITY_MAP[raw_rarity] if 0 <= raw_rarity < len(CARD_RARITY_MAP) else CardRarity.COMMON
