# ABOUTME: Typed row models for every host table the pipeline reads
# ABOUTME: Rows are immutable and always carry the host's numeric row id

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HostTableName(str, Enum):
    """Fixed schema names of the host tables."""

    RULE = "TripleTriadRule"
    CARD_TYPE = "TripleTriadCardType"
    CARD_RARITY = "TripleTriadCardRarity"
    CARD_STATS = "TripleTriadCardResident"
    CARD_NAME = "TripleTriadCard"
    OPPONENT = "TripleTriad"
    NPC_NAME = "ENpcResident"
    NPC_BASE = "ENpcBase"
    OPPONENT_ACHIEVEMENT = "TripleTriadResident"
    PLACEMENT = "Level"
    MAP = "Map"
    ITEM = "Item"


class HostRow(BaseModel):
    """Base for all host rows."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    row_id: int = Field(ge=0, description="Numeric row id assigned by the host")


class RuleRow(HostRow):
    name: str = Field(default="", description="Localized rule name")


class CardTypeRow(HostRow):
    name: str = Field(default="", description="Localized card type name")


class CardRarityRow(HostRow):
    stars: int = Field(default=0, description="Number of rarity stars")


class CardStatsRow(HostRow):
    """Per-card numbers. A row with top == 0 is an unused slot."""

    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0
    card_type: int = Field(default=0, description="Row id in the card type table")
    card_rarity: int = Field(default=0, description="Row id in the card rarity table")
    order: int = 0
    ui_priority: int = 0
    sort_key: int = 0
    sale_value: int = 0


class CardNameRow(HostRow):
    name: str = ""


class OpponentRow(HostRow):
    """Card game opponent definition. Row ids are sparse."""

    rules: list[int] | None = Field(default=None, description="Row ids in the rule table, 0 means empty")
    fixed_cards: list[int] | None = Field(default=None, description="Cards always in the deck, 0 means empty")
    variable_cards: list[int] | None = Field(default=None, description="Cards drawn at random, 0 means empty")
    fee: int = Field(default=0, description="Match fee")
    reward_items: list[int] | None = Field(default=None, description="Row ids in the item table")


class NpcNameRow(HostRow):
    singular: str = ""


class NpcBaseRow(HostRow):
    data_links: list[int] = Field(default_factory=list, description="Ids of data rows attached to this NPC")


class OpponentAchievementRow(HostRow):
    order: int = 0


class PlacementRow(HostRow):
    """Placed object in the world, holds many entity kinds distinguished by type."""

    type: int = 0
    object_id: int = Field(default=0, description="Entity id, an NPC base row id for NPC placements")
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    map_id: int = 0
    territory_id: int = 0


class MapRow(HostRow):
    offset_x: int = 0
    offset_y: int = 0
    size_factor: int = 100


class ItemRow(HostRow):
    additional_data: int = Field(default=0, description="Item specific payload, a card id for card items")


ROW_MODELS: dict[HostTableName, type[HostRow]] = {
    HostTableName.RULE: RuleRow,
    HostTableName.CARD_TYPE: CardTypeRow,
    HostTableName.CARD_RARITY: CardRarityRow,
    HostTableName.CARD_STATS: CardStatsRow,
    HostTableName.CARD_NAME: CardNameRow,
    HostTableName.OPPONENT: OpponentRow,
    HostTableName.NPC_NAME: NpcNameRow,
    HostTableName.NPC_BASE: NpcBaseRow,
    HostTableName.OPPONENT_ACHIEVEMENT: OpponentAchievementRow,
    HostTableName.PLACEMENT: PlacementRow,
    HostTableName.MAP: MapRow,
    HostTableName.ITEM: ItemRow,
}
