# ABOUTME: Opponent location parser matching NPC placements to cached opponents
# ABOUTME: Converts raw world positions into map coordinates using each map's offset and size factor

from triad_ingest.core.context import LoadContext
from triad_ingest.domain.coords import convert_map_position
from triad_ingest.host import HostTableName
from triad_ingest.utils.logging import get_logger, log_stage

logger = get_logger(__name__)

PLACEMENT_TYPE_NPC = 8


@log_stage("opponent_locations")
def parse_opponent_locations(ctx: LoadContext) -> None:
    """Attach raw placement data and map coordinates to cached opponents.

    Opponents that never get a placement keep map_id 0 and are dropped by the finalizer.
    Missing tables or map rows leave entries without coordinates, they never fail the stage.
    """
    entries = ctx.cache.opponents

    placement_table = ctx.table(HostTableName.PLACEMENT)
    if placement_table is not None:
        for row in placement_table:
            if row.type != PLACEMENT_TYPE_NPC:
                continue

            entry = entries.get(row.object_id)
            if entry is not None:
                entry.raw_coords = (row.x, row.y, row.z)
                entry.map_id = row.map_id
                entry.territory_id = row.territory_id

    map_table = ctx.table(HostTableName.MAP)
    if map_table is None:
        return

    for npc_id, entry in entries.items():
        if entry.raw_coords is None:
            continue

        map_row = map_table.get_row(entry.map_id)
        if map_row is None or map_row.size_factor <= 0:
            logger.debug("No usable map metadata", npc_id=npc_id, map_id=entry.map_id)
            continue

        entry.map_coords = convert_map_position(
            entry.raw_coords, map_row.offset_x, map_row.offset_y, map_row.size_factor
        )
