# ABOUTME: Destination catalogues filled by the game data pipeline
# ABOUTME: GameData bundles every catalogue so a whole load can be built and published as one unit

from collections import defaultdict
from collections.abc import Iterator
from dataclasses import dataclass, field

from triad_ingest.domain.enums import CardType, RuleKind
from triad_ingest.domain.models import Card, CardInfo, GameRule, Opponent, OpponentInfo


@dataclass
class RuleCatalogue:
    """Fixed list of rules in logic order, only their localized names come from the host."""

    rules: list[GameRule]

    @classmethod
    def create(cls) -> "RuleCatalogue":
        return cls([GameRule(logic_index=idx, kind=kind) for idx, kind in enumerate(RuleKind)])

    def __len__(self) -> int:
        return len(self.rules)

    def __getitem__(self, logic_index: int) -> GameRule:
        return self.rules[logic_index]

    def __iter__(self) -> Iterator[GameRule]:
        return iter(self.rules)


@dataclass
class LocalizationTable:
    """Localized strings owned by the game logic."""

    card_type_names: dict[CardType, str] = field(default_factory=lambda: {card_type: "" for card_type in CardType})
    opponent_names: dict[int, str] = field(default_factory=dict)

    @property
    def card_type_slot_count(self) -> int:
        return len(self.card_type_names)


@dataclass
class CardCatalogue:
    """Cards indexed directly by id. Position 0 is reserved and unused ids hold None."""

    cards: list[Card | None] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card | None]:
        return iter(self.cards)

    def find_by_id(self, card_id: int) -> Card | None:
        if 0 <= card_id < len(self.cards):
            return self.cards[card_id]
        return None

    @property
    def card_count(self) -> int:
        return sum(1 for card in self.cards if card is not None)

    def process_same_side_lists(self) -> None:
        """Link every card to the other cards sharing its exact set of side values."""
        groups: dict[tuple[int, ...], list[Card]] = defaultdict(list)
        for card in self.cards:
            if card is not None:
                groups[card.side_signature].append(card)

        for group in groups.values():
            for card in group:
                card.same_sides = [other.id for other in group if other.id != card.id]


@dataclass
class GameData:
    """Every destination catalogue produced by one successful load."""

    rules: RuleCatalogue = field(default_factory=RuleCatalogue.create)
    localization: LocalizationTable = field(default_factory=LocalizationTable)
    cards: CardCatalogue = field(default_factory=CardCatalogue)
    card_infos: dict[int, CardInfo] = field(default_factory=dict)
    opponents: list[Opponent] = field(default_factory=list)
    opponent_infos: dict[int, OpponentInfo] = field(default_factory=dict)

    def find_card_info(self, card_id: int) -> CardInfo | None:
        return self.card_infos.get(card_id)

    @property
    def is_empty(self) -> bool:
        return not self.cards.cards and not self.card_infos and not self.opponents and not self.opponent_infos
