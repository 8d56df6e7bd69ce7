# ABOUTME: Card reward parser resolving opponent reward items into card ids
# ABOUTME: Best effort, unresolved rewards are recorded as warnings and skipped

from triad_ingest.core.context import LoadContext
from triad_ingest.errors import DiagnosticKind
from triad_ingest.host import HostTableName
from triad_ingest.utils.logging import log_stage


@log_stage("card_rewards")
def parse_card_rewards(ctx: LoadContext) -> None:
    """Resolve each cached opponent's reward items to cards.

    The item's additional data holds the card id. Resolved items are also written back
    to the card's extended info.
    """
    item_table = ctx.table(HostTableName.ITEM)
    if item_table is None:
        return

    for entry in ctx.cache.opponents.values():
        for item_id in entry.reward_items:
            item_row = item_table.get_row(item_id) if item_id != 0 else None
            if item_row is None:
                continue

            card = ctx.data.cards.find_by_id(item_row.additional_data)
            if card is None:
                ctx.record(
                    DiagnosticKind.REFERENCE_WARNING,
                    f"Failed to parse npc reward data! npc:{entry.host_opponent_id}, rewardId:{item_id}",
                    opponent_id=entry.host_opponent_id,
                    item_id=item_id,
                    card_id=item_row.additional_data,
                )
                continue

            card_info = ctx.data.find_card_info(card.id)
            if card_info is not None:
                card_info.item_id = item_id

            entry.reward_card_ids.append(card.id)
