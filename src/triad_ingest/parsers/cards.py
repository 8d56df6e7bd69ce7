# ABOUTME: Card parser building the card catalogue and extended card info
# ABOUTME: Card ids must track host row ids, drift beyond the configured slack aborts the load

from triad_ingest.core.context import LoadContext
from triad_ingest.domain.mappings import CARD_RARITY_MAP, CARD_TYPE_MAP, convert_card_rarity, convert_card_type
from triad_ingest.domain.models import Card, CardInfo
from triad_ingest.errors import IndexDriftError, SchemaMismatchError
from triad_ingest.host import CardStatsRow, HostTableName
from triad_ingest.utils.logging import get_logger, log_stage

logger = get_logger(__name__)


def _check_lookup_table(ctx: LoadContext, name: HostTableName, expected: int) -> None:
    table = ctx.table(name)
    got = table.row_count if table is not None else 0
    if table is None or got != expected:
        raise SchemaMismatchError(
            f"Failed to parse {name.value} (got:{got}, expected:{expected})",
            table=name.value,
            expected=expected,
            got=got,
        )


def build_card(row: CardStatsRow, name: str) -> Card:
    """Create a card from its host stats row.

    Host left/right are swapped relative to this system's sides, every consumer
    of Card relies on that swap.
    """
    return Card(
        id=row.row_id,
        name=name,
        rarity=convert_card_rarity(row.card_rarity),
        type=convert_card_type(row.card_type),
        top=row.top,
        bottom=row.bottom,
        left=row.right,
        right=row.left,
        order=row.order,
        ui_priority=row.ui_priority,
    )


@log_stage("cards")
def parse_cards(ctx: LoadContext) -> None:
    """Fill the card catalogue and the extended card info map.

    Cards are stored at index == id, position 0 is reserved. Rows with top == 0 are
    unused slots and are skipped, the gaps they leave are padded with None.

    Raises:
        SchemaMismatchError: If a required table is missing or has an unexpected size
        IndexDriftError: If a card id is too far from the catalogue's current length
    """
    stats_table = ctx.table(HostTableName.CARD_STATS)
    names_table = ctx.table(HostTableName.CARD_NAME)

    if stats_table is None or names_table is None or stats_table.row_count != names_table.row_count:
        raise SchemaMismatchError(
            "Failed to parse card data "
            f"(D:{stats_table.row_count if stats_table else 0}, N:{names_table.row_count if names_table else 0})",
            table=HostTableName.CARD_STATS.value,
        )

    _check_lookup_table(ctx, HostTableName.CARD_TYPE, len(CARD_TYPE_MAP))
    _check_lookup_table(ctx, HostTableName.CARD_RARITY, len(CARD_RARITY_MAP))

    cards = ctx.data.cards.cards
    card_infos = ctx.data.card_infos

    for row in stats_table:
        if row.top <= 0:
            continue

        name_row = names_table.get_row(row.row_id)
        if name_row is None:
            raise SchemaMismatchError(
                f"Failed to parse card data (missing name row:{row.row_id})",
                table=HostTableName.CARD_NAME.value,
                row_id=row.row_id,
            )

        if abs(len(cards) - row.row_id) > ctx.index_drift_slack:
            raise IndexDriftError(
                f"Failed to assign card data (got:{len(cards)}, expected:{row.row_id})",
                got=len(cards),
                expected=row.row_id,
                slack=ctx.index_drift_slack,
            )

        card = build_card(row, name_row.name)
        while len(cards) < row.row_id:
            cards.append(None)
        cards.append(card)

        card_infos[card.id] = CardInfo(card_id=card.id, sort_key=row.sort_key, sale_value=row.sale_value)

    ctx.data.cards.process_same_side_lists()
    logger.info("Cards parsed", cards=len(card_infos), catalogue_size=len(cards))
