# ABOUTME: Promotes located opponents from the transient cache into the destination catalogues
# ABOUTME: Builds opponent info records and the reverse card → rewarding opponent links

from triad_ingest.core.cache import OpponentCacheEntry
from triad_ingest.core.context import LoadContext
from triad_ingest.domain.models import MapLink, OpponentInfo
from triad_ingest.errors import DiagnosticKind
from triad_ingest.utils.logging import get_logger

logger = get_logger(__name__)


def _build_location(entry: OpponentCacheEntry) -> MapLink | None:
    if entry.map_coords is None:
        return None
    x, y = entry.map_coords
    return MapLink(territory_id=entry.territory_id, map_id=entry.map_id, x=x, y=y)


def finalize_opponents(ctx: LoadContext) -> None:
    """Publish located opponents into the arena and link their rewards.

    Only cache entries with an opponent and a map id survive, the rest are NPCs the host
    never places in the world. Survivors are ordered by name slot and each gets its
    position in that order as its opponent index.
    """
    data = ctx.data

    located = [entry for entry in ctx.cache.opponents.values() if entry.opponent is not None and entry.has_location]
    dropped = sum(1 for entry in ctx.cache.opponents.values() if entry.opponent is not None) - len(located)

    located.sort(key=lambda entry: entry.opponent.name_loc_id)  # type: ignore[union-attr]
    data.opponents.clear()
    for entry in located:
        entry.opponent_index = len(data.opponents)
        data.opponents.append(entry.opponent)  # type: ignore[arg-type]

    data.opponent_infos.clear()
    for index, entry in enumerate(located):
        achievement_order = ctx.cache.achievement_orders.get(entry.host_opponent_id)
        if achievement_order is None:
            ctx.record(
                DiagnosticKind.MISSING_ACHIEVEMENT,
                f"Failed to find achievement order for opponent:{entry.host_opponent_id}",
                opponent_id=entry.host_opponent_id,
            )

        info = OpponentInfo(
            opponent_index=index,
            host_opponent_id=entry.host_opponent_id,
            achievement_order=achievement_order,
            match_fee=entry.match_fee,
            location=_build_location(entry),
        )

        for card_id in entry.reward_card_ids:
            card_info = data.find_card_info(card_id)
            if index >= len(data.opponents) or card_info is None:
                ctx.record(
                    DiagnosticKind.CROSS_REFERENCE_MISMATCH,
                    f"Failed to match npc reward data! npc:{index}, card:{card_id}",
                    opponent_index=index,
                    card_id=card_id,
                )
                continue

            info.reward_cards.append(card_id)
            card_info.reward_opponents.append(index)

        data.opponent_infos[index] = info

    logger.info("Opponents finalized", opponents=len(data.opponents), dropped_without_location=dropped)
