# ABOUTME: Transient per-run cache of opponent data shared between parser stages
# ABOUTME: Keyed by host NPC entity id, discarded once the finalizer has run

from dataclasses import dataclass, field

from triad_ingest.domain.models import Opponent


@dataclass
class OpponentCacheEntry:
    """Everything known about one opponent while the parser stages run."""

    host_opponent_id: int
    opponent: Opponent | None = None
    opponent_index: int | None = None  # set by the finalizer

    raw_coords: tuple[float, float, float] | None = None
    map_coords: tuple[float, float] | None = None
    map_id: int = 0
    territory_id: int = 0

    reward_items: list[int] = field(default_factory=list)
    reward_card_ids: list[int] = field(default_factory=list)

    match_fee: int = 0

    @property
    def has_location(self) -> bool:
        return self.map_id != 0


@dataclass
class PipelineCache:
    """Opponent entries keyed by NPC entity id, plus achievement order keyed by host opponent id."""

    opponents: dict[int, OpponentCacheEntry] = field(default_factory=dict)
    achievement_orders: dict[int, int] = field(default_factory=dict)

    def clear(self) -> None:
        self.opponents.clear()
        self.achievement_orders.clear()
