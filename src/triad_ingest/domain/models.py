# ABOUTME: Domain models for cards, rules and opponents produced by the game data pipeline
# ABOUTME: Pydantic models for destination records and the per-card / per-opponent extended info

from pydantic import BaseModel, Field

from triad_ingest.domain.enums import CardRarity, CardType, RuleKind

DECK_SLOTS = 5


class GameRule(BaseModel):
    """A match rule modifier, identified by its position in the logic rule list."""

    logic_index: int = Field(ge=0, description="Position in RuleKind order")
    kind: RuleKind
    localized_name: str = Field(default="", description="Rule name in the host's current language")


class Card(BaseModel):
    """A playable card.

    Side values follow this system's convention. The host stores left and right the other
    way around and the card parser swaps them on the way in.
    """

    id: int = Field(ge=0, description="Card id, equal to the host card row id and the catalogue position")
    name: str
    rarity: CardRarity
    type: CardType
    top: int
    bottom: int
    left: int
    right: int
    order: int = Field(default=0, description="Display order")
    ui_priority: int = 0
    same_sides: list[int] = Field(default_factory=list, description="Other cards with the same set of side values")

    @property
    def sides(self) -> tuple[int, int, int, int]:
        return (self.top, self.bottom, self.left, self.right)

    @property
    def side_signature(self) -> tuple[int, ...]:
        """Side values ignoring position, cards with equal signatures are interchangeable for some rules."""
        return tuple(sorted(self.sides))


class CardInfo(BaseModel):
    """Extended card data that isn't needed by the match logic."""

    card_id: int
    sort_key: int = 0
    sale_value: int = 0
    item_id: int | None = Field(default=None, description="Item granting this card when won from an opponent")
    reward_opponents: list[int] = Field(default_factory=list, description="Indices of opponents rewarding this card")


class Opponent(BaseModel):
    """Non-player card game opponent."""

    id: int = Field(ge=0, description="Sequential id assigned while parsing")
    name_loc_id: int = Field(ge=0, description="Slot in the opponent name localization table")
    name: str
    rules: list[GameRule] = Field(default_factory=list)
    fixed_cards: list[int] = Field(
        default_factory=lambda: [0] * DECK_SLOTS, description="Card ids always in the deck, 0 means empty"
    )
    variable_cards: list[int] = Field(
        default_factory=lambda: [0] * DECK_SLOTS, description="Card ids drawn at random, 0 means empty"
    )

    @property
    def card_ids(self) -> list[int]:
        return [card_id for card_id in (*self.fixed_cards, *self.variable_cards) if card_id]


class MapLink(BaseModel):
    """Location of an opponent on a map."""

    territory_id: int
    map_id: int
    x: float
    y: float


class OpponentInfo(BaseModel):
    """Extended opponent data built once all opponents are known."""

    opponent_index: int = Field(ge=0, description="Position in the opponent catalogue")
    host_opponent_id: int = Field(description="Row id in the host opponent table")
    achievement_order: int | None = Field(default=None, description="Ordering used by the host's achievement list")
    match_fee: int = 0
    location: MapLink | None = None
    reward_cards: list[int] = Field(default_factory=list)
