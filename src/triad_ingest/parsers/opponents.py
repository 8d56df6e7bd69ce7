# ABOUTME: Opponent parser resolving NPC identities, rules and decks for every card game opponent
# ABOUTME: Results go to the transient cache, opponents are not published until they have a location

from dataclasses import dataclass

from triad_ingest.core.cache import OpponentCacheEntry
from triad_ingest.core.context import LoadContext
from triad_ingest.domain.mappings import RULE_HOST_TO_LOGIC
from triad_ingest.domain.models import DECK_SLOTS, GameRule, Opponent
from triad_ingest.errors import CrossReferenceMismatchError, EmptyDatasetError, SchemaMismatchError
from triad_ingest.host import HostTable, HostTableName, OpponentRow
from triad_ingest.utils.logging import get_logger, log_stage

logger = get_logger(__name__)


@dataclass(frozen=True)
class NpcIdentity:
    """Link between a host opponent row and the NPC entity that offers the match."""

    opponent_id: int
    npc_id: int
    name: str


def resolve_npc_identities(
    opponent_ids: set[int], npc_base_table: HostTable, npc_name_table: HostTable
) -> dict[int, NpcIdentity]:
    """Find the NPC entity and display name for each opponent id.

    Each NPC base row is checked for the first of its data links that is an opponent id.
    When several NPCs point at the same opponent, the first NPC row wins.

    Returns:
        Mapping of opponent id to its NPC identity
    """
    identities: dict[int, NpcIdentity] = {}

    for base_row in npc_base_table:
        opponent_id = next((link for link in base_row.data_links if link in opponent_ids), 0)
        if opponent_id == 0 or opponent_id in identities:
            continue

        name_row = npc_name_table.get_row(base_row.row_id)
        if name_row is not None:
            identities[opponent_id] = NpcIdentity(
                opponent_id=opponent_id, npc_id=base_row.row_id, name=name_row.singular
            )

    return identities


def _resolve_rules(ctx: LoadContext, row: OpponentRow, rule_table: HostTable) -> list[GameRule]:
    rules = ctx.data.rules
    resolved: list[GameRule] = []

    for rule_id in row.rules or []:
        if rule_id == 0:
            continue
        if rule_id >= len(rules):
            raise CrossReferenceMismatchError(
                f"Failed to parse npc data (rule.id:{rule_id})", opponent_id=row.row_id, rule_id=rule_id
            )

        logic_rule = rules[RULE_HOST_TO_LOGIC[rule_id]]
        host_rule = rule_table.get_row(rule_id)
        host_name = host_rule.name if host_rule is not None else None

        # Catches the host reordering its rules without the permutation being updated
        if host_name != logic_rule.localized_name:
            raise CrossReferenceMismatchError(
                f"Failed to match npc rules! (rule.id:{rule_id})",
                opponent_id=row.row_id,
                rule_id=rule_id,
                host_name=host_name,
                logic_name=logic_rule.localized_name,
            )

        resolved.append(logic_rule)

    return resolved


def _resolve_deck_slots(ctx: LoadContext, row: OpponentRow, slots: list[int] | None, label: str) -> list[int]:
    if slots is None:
        return [0] * DECK_SLOTS

    if len(slots) != DECK_SLOTS:
        raise SchemaMismatchError(
            f"Failed to parse npc data (num {label}:{len(slots)})", opponent_id=row.row_id, slots=len(slots)
        )

    for card_id in slots:
        if card_id != 0 and card_id >= len(ctx.data.cards):
            raise CrossReferenceMismatchError(
                f"Failed to parse npc data (card.id:{card_id})", opponent_id=row.row_id, card_id=card_id
            )

    return list(slots)


@log_stage("opponents")
def parse_opponents(ctx: LoadContext) -> None:
    """Create opponents and record them in the transient cache keyed by NPC entity id.

    Opponents without an NPC name, or without any cards, are disabled host rows and are
    skipped. Name slots are only handed out to opponents that pass every check, so the
    slots stay dense.

    Raises:
        EmptyDatasetError: If the opponent table has no usable ids
        SchemaMismatchError: If a required table is missing or a row has the wrong shape
        CrossReferenceMismatchError: If a rule or card reference doesn't resolve
    """
    opponent_table = ctx.table(HostTableName.OPPONENT)

    # Row ids are sparse here, 0 is a placeholder row
    opponent_ids = {row.row_id for row in opponent_table} if opponent_table is not None else set()
    opponent_ids.discard(0)
    if opponent_table is None or not opponent_ids:
        raise EmptyDatasetError("Failed to parse npc data (missing ids)", table=HostTableName.OPPONENT.value)

    npc_name_table = ctx.table(HostTableName.NPC_NAME)
    npc_base_table = ctx.table(HostTableName.NPC_BASE)
    if npc_name_table is None or npc_base_table is None:
        raise SchemaMismatchError(
            "Failed to parse npc data "
            f"(NN:{npc_name_table.row_count if npc_name_table else 0}, "
            f"NB:{npc_base_table.row_count if npc_base_table else 0})",
            table=HostTableName.NPC_BASE.value,
        )

    rule_table = ctx.require_table(HostTableName.RULE)
    identities = resolve_npc_identities(opponent_ids, npc_base_table, npc_name_table)

    name_loc_id = 0
    for row in opponent_table:
        identity = identities.get(row.row_id)
        if identity is None:
            continue

        rules = _resolve_rules(ctx, row, rule_table)
        fixed_cards = _resolve_deck_slots(ctx, row, row.fixed_cards, "CF")
        variable_cards = _resolve_deck_slots(ctx, row, row.variable_cards, "CV")

        if not any(fixed_cards) and not any(variable_cards):
            continue

        opponent = Opponent(
            id=name_loc_id,
            name_loc_id=name_loc_id,
            name=identity.name,
            rules=rules,
            fixed_cards=fixed_cards,
            variable_cards=variable_cards,
        )
        ctx.data.localization.opponent_names[name_loc_id] = identity.name
        name_loc_id += 1

        ctx.cache.opponents[identity.npc_id] = OpponentCacheEntry(
            host_opponent_id=row.row_id,
            opponent=opponent,
            reward_items=list(row.reward_items or []),
            match_fee=row.fee,
        )

    logger.info("Opponents parsed", opponents=name_loc_id, host_rows=len(opponent_ids))
