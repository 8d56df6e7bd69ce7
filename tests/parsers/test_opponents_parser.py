# ABOUTME: Tests for the opponent parser stage and NPC identity resolution
# ABOUTME: Validates cache contents, dense name slots and fatal reference checks

import pytest

from triad_ingest.core.context import LoadContext
from triad_ingest.core.pipeline import GameDataLoader
from triad_ingest.core.store import GameDataStore
from triad_ingest.domain import RuleKind
from triad_ingest.errors import CrossReferenceMismatchError, EmptyDatasetError, SchemaMismatchError
from triad_ingest.host import HostTableName, NpcBaseRow, NpcNameRow, RuleRow, build_table_source
from triad_ingest.host.tables import InMemoryTable
from triad_ingest.parsers import parse_opponents, resolve_npc_identities
from triad_ingest.utils.retry import RetryPolicy


def context_with_opponents(host_snapshot, run_stages, opponents: list[dict]) -> LoadContext:
    host_snapshot["TripleTriad"] = [{"row_id": 0}, *opponents]
    ctx = LoadContext(source=build_table_source(host_snapshot))
    return run_stages(ctx, "cards")


class TestResolveNpcIdentities:
    """Test linking opponent rows to NPC entities."""

    def test_first_matching_link_and_row_win(self):
        """Test first-match semantics on both data links and NPC rows."""
        base = InMemoryTable(
            [
                NpcBaseRow(row_id=1, data_links=[0, 50, 10]),
                NpcBaseRow(row_id=2, data_links=[10]),
                NpcBaseRow(row_id=3, data_links=[11]),
            ]
        )
        names = InMemoryTable(
            [NpcNameRow(row_id=1, singular="First"), NpcNameRow(row_id=2, singular="Second"), NpcNameRow(row_id=3)]
        )

        identities = resolve_npc_identities({10, 11, 50}, base, names)

        assert identities[50].npc_id == 1
        assert identities[10].npc_id == 2
        assert identities[11].name == ""

    def test_npc_without_name_row(self):
        """Test that NPC base rows without a name row are ignored."""
        base = InMemoryTable([NpcBaseRow(row_id=1, data_links=[10]), NpcBaseRow(row_id=2, data_links=[10])])
        names = InMemoryTable([NpcNameRow(row_id=2, singular="Named")])

        identities = resolve_npc_identities({10}, base, names)

        assert identities[10].npc_id == 2


class TestParseOpponents:
    """Test the opponent parser."""

    def test_cache_keyed_by_npc_id(self, load_context, run_stages):
        """Test that usable opponents are cached under their NPC entity id."""
        run_stages(load_context, "opponents")
        cache = load_context.cache.opponents

        # 1003 has no cards, 1005 lost the first-match race to 1001
        assert sorted(cache) == [1001, 1002, 1004]
        assert cache[1001].host_opponent_id == 10
        assert cache[1002].host_opponent_id == 11
        assert cache[1004].host_opponent_id == 13

    def test_opponent_fields(self, load_context, run_stages):
        """Test the built opponent and its cache entry."""
        run_stages(load_context, "opponents")
        entry = load_context.cache.opponents[1001]
        opponent = entry.opponent

        assert opponent.name == "Triple Triad Master"
        assert [rule.kind for rule in opponent.rules] == [RuleKind.ROULETTE]
        assert opponent.rules[0].localized_name == "Rule 1"
        assert opponent.fixed_cards == [1, 2, 0, 0, 0]
        assert opponent.variable_cards == [4, 5, 0, 0, 0]
        assert entry.reward_items == [2001, 2002]
        assert entry.match_fee == 100
        assert entry.map_id == 0

    def test_missing_variable_slots_default_empty(self, load_context, run_stages):
        """Test that absent slot arrays become five empty slots."""
        run_stages(load_context, "opponents")

        assert load_context.cache.opponents[1002].opponent.variable_cards == [0, 0, 0, 0, 0]

    def test_name_slots_are_dense(self, load_context, run_stages):
        """Test that skipped rows don't consume name slots."""
        run_stages(load_context, "opponents")
        cache = load_context.cache.opponents

        assert cache[1001].opponent.name_loc_id == 0
        assert cache[1002].opponent.name_loc_id == 1
        assert cache[1004].opponent.name_loc_id == 2
        assert load_context.data.localization.opponent_names == {
            0: "Triple Triad Master",
            1: "Wymond",
            2: "Roaming Merchant",
        }

    def test_opponents_not_published_yet(self, load_context, run_stages):
        """Test that the stage only fills the cache."""
        run_stages(load_context, "opponents")

        assert load_context.data.opponents == []
        assert load_context.data.opponent_infos == {}

    def test_rule_name_mismatch(self, load_context, run_stages):
        """Test that a host rule renamed after rule parsing is caught."""
        run_stages(load_context, "cards")
        renamed = [RuleRow(row_id=row_id, name=f"Rule {row_id}") for row_id in range(16)]
        renamed[1] = RuleRow(row_id=1, name="Renamed")
        load_context.source.set_table(HostTableName.RULE, renamed)

        with pytest.raises(CrossReferenceMismatchError, match=r"rule.id:1"):
            parse_opponents(load_context)

    def test_rule_id_out_of_range(self, host_snapshot, run_stages):
        """Test a rule slot pointing past the rule table."""
        ctx = context_with_opponents(
            host_snapshot, run_stages, [{"row_id": 10, "rules": [16], "fixed_cards": [1, 0, 0, 0, 0]}]
        )

        with pytest.raises(CrossReferenceMismatchError, match=r"rule.id:16"):
            parse_opponents(ctx)

    def test_wrong_slot_count(self, host_snapshot, run_stages):
        """Test that deck slot arrays must have five entries."""
        ctx = context_with_opponents(host_snapshot, run_stages, [{"row_id": 10, "fixed_cards": [1, 0, 0, 0]}])

        with pytest.raises(SchemaMismatchError, match=r"num CF:4"):
            parse_opponents(ctx)

    @pytest.mark.parametrize("card_id", [6, 99])
    def test_card_reference_past_catalogue(self, host_snapshot, run_stages, card_id):
        """Test that deck cards must fall inside the card catalogue."""
        ctx = context_with_opponents(
            host_snapshot, run_stages, [{"row_id": 10, "variable_cards": [card_id, 0, 0, 0, 0]}]
        )

        with pytest.raises(CrossReferenceMismatchError, match=rf"card.id:{card_id}"):
            parse_opponents(ctx)

    def test_card_reference_to_skipped_row(self, host_snapshot, run_stages):
        """Test that a deck card on a padded catalogue slot is accepted."""
        ctx = context_with_opponents(
            host_snapshot, run_stages, [{"row_id": 10, "variable_cards": [4, 3, 0, 0, 0]}]
        )
        assert ctx.data.cards.find_by_id(3) is None

        parse_opponents(ctx)

        assert ctx.cache.opponents[1001].opponent.variable_cards == [4, 3, 0, 0, 0]

    @pytest.mark.asyncio
    async def test_skipped_row_reference_still_loads(self, host_snapshot):
        """Test that a full load succeeds when a deck lists a skipped card row."""
        host_snapshot["TripleTriad"][1]["variable_cards"] = [4, 3, 0, 0, 0]
        loader = GameDataLoader(store=GameDataStore(), policy=RetryPolicy(max_attempts=1, delay_seconds=0))

        report = await loader.load(build_table_source(host_snapshot))

        assert report.is_ready
        assert report.attempts == 1

    def test_no_opponent_ids(self, host_snapshot, run_stages):
        """Test that a table holding only the placeholder row is empty."""
        ctx = context_with_opponents(host_snapshot, run_stages, [])

        with pytest.raises(EmptyDatasetError):
            parse_opponents(ctx)

    def test_missing_npc_tables(self, host_snapshot, run_stages):
        """Test that NPC tables are required."""
        del host_snapshot["ENpcBase"]
        ctx = run_stages(LoadContext(source=build_table_source(host_snapshot)), "cards")

        with pytest.raises(SchemaMismatchError, match=r"NB:0"):
            parse_opponents(ctx)
