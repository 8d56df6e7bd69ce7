# ABOUTME: Opponent achievement parser reading the optional ordering table

from triad_ingest.core.context import LoadContext
from triad_ingest.host import HostTableName
from triad_ingest.utils.logging import log_stage


@log_stage("opponent_achievements")
def parse_opponent_achievements(ctx: LoadContext) -> None:
    """Map host opponent ids to their achievement order. A missing table is not an error."""
    table = ctx.table(HostTableName.OPPONENT_ACHIEVEMENT)
    if table is None:
        return

    for row in table:
        ctx.cache.achievement_orders[row.row_id] = row.order
