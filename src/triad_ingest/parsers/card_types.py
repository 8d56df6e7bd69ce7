# ABOUTME: Card type parser filling the localized card type names

from triad_ingest.core.context import LoadContext
from triad_ingest.domain.mappings import convert_card_type
from triad_ingest.errors import SchemaMismatchError
from triad_ingest.host import HostTableName
from triad_ingest.utils.logging import log_stage


@log_stage("card_types")
def parse_card_types(ctx: LoadContext) -> None:
    """Copy card type names into the localization table.

    Raises:
        SchemaMismatchError: If the table is missing or doesn't have one row per card type slot
    """
    localization = ctx.data.localization
    table = ctx.table(HostTableName.CARD_TYPE)
    got = table.row_count if table is not None else 0

    if table is None or table.row_count != localization.card_type_slot_count:
        raise SchemaMismatchError(
            f"Failed to parse card types (got:{got}, expected:{localization.card_type_slot_count})",
            table=HostTableName.CARD_TYPE.value,
            expected=localization.card_type_slot_count,
            got=got,
        )

    for row in table:
        localization.card_type_names[convert_card_type(row.row_id)] = row.name
