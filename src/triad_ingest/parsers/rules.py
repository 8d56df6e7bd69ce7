# ABOUTME: Rule parser copying localized rule names from the host rule table
# ABOUTME: Logic rules map to host rows through the fixed RULE_LOGIC_TO_HOST permutation

from triad_ingest.core.context import LoadContext
from triad_ingest.domain.mappings import RULE_LOGIC_TO_HOST
from triad_ingest.errors import SchemaMismatchError
from triad_ingest.host import HostTableName
from triad_ingest.utils.logging import get_logger, log_stage

logger = get_logger(__name__)


@log_stage("rules")
def parse_rules(ctx: LoadContext) -> None:
    """Update rule names to match the host's current language.

    Names are collected before any rule is touched, a failure leaves every rule unchanged.

    Raises:
        SchemaMismatchError: If the rule table is missing or its size differs from the rule catalogue
    """
    rules = ctx.data.rules
    table = ctx.table(HostTableName.RULE)
    got = table.row_count if table is not None else 0

    if table is None or table.row_count != len(rules):
        raise SchemaMismatchError(
            f"Failed to parse rules (got:{got}, expected:{len(rules)})",
            table=HostTableName.RULE.value,
            expected=len(rules),
            got=got,
        )

    names: list[str] = []
    for logic_idx in range(len(rules)):
        host_id = RULE_LOGIC_TO_HOST[logic_idx]
        row = table.get_row(host_id)
        if row is None:
            raise SchemaMismatchError(
                f"Failed to parse rules (missing row:{host_id})", table=HostTableName.RULE.value, row_id=host_id
            )
        names.append(row.name)

    for rule, name in zip(rules, names, strict=True):
        rule.localized_name = name

    logger.debug("Rule names updated", rules=len(rules))
