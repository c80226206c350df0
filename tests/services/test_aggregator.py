from sleeper_adp.domain.draft_pick import DraftPick, PickMetadata
from sleeper_adp.domain.identity import player_id_key
from sleeper_adp.services.aggregator import AdpAccumulator, aggregate_picks
from tests.helpers import make_pick


def _sample_draft() -> list[DraftPick]:
    return [
        make_pick(1, name="Ja'Marr Chase", position="WR"),
        make_pick(2, name="Bijan Robinson", position="RB"),
        make_pick(3, name="Justin Jefferson", position="WR"),
        make_pick(13, name="Puka Nacua", position="WR"),
        make_pick(14, name="Josh Allen", position="QB"),
        make_pick(None, name="Broken Pick", position="TE"),
    ]


class TestPlayerStats:
    def test_counts_conserve_valid_picks(self) -> None:
        result = aggregate_picks(_sample_draft(), 12)
        assert sum(s.count for s in result.players.values()) == result.picks_used == 5
        assert result.picks_skipped == 1

    def test_single_pick_average_is_exact(self) -> None:
        result = aggregate_picks([make_pick(14, name="Josh Allen", position="QB")], 12)
        stat = result.players["Josh AllenQB"]
        assert stat.avg_overall_pick == 14
        assert stat.mode_overall_pick == 14
        assert stat.avg_round_pick == "2.02"
        assert stat.mode_round_pick == "2.02"

    def test_average_and_mode_over_multiple_picks(self) -> None:
        picks = [make_pick(p, name="Breece Hall", position="RB") for p in (5, 5, 9, 9, 9, 20)]
        stat = aggregate_picks(picks, 12).players["Breece HallRB"]
        assert stat.count == 6
        assert stat.avg_overall_pick == 57 / 6
        assert stat.mode_overall_pick == 9
        assert stat.avg_round_pick == "1.10"

    def test_mode_tie_goes_to_earliest_pick(self) -> None:
        picks = [make_pick(p, name="Breece Hall", position="RB") for p in (9, 5, 9, 5)]
        assert aggregate_picks(picks, 12).players["Breece HallRB"].mode_overall_pick == 5

    def test_unusable_picks_are_skipped(self) -> None:
        picks = [
            make_pick(None, name="A", round=1, draft_slot=1),
            DraftPick(pick_no=3, round=None, draft_slot=3, player_id="b"),
            DraftPick(pick_no=4, round=1, draft_slot=None, player_id="c"),
            make_pick(5, name="D"),
        ]
        result = aggregate_picks(picks, 12)
        assert list(result.players) == ["DRB"]
        assert result.picks_skipped == 3
        assert result.picks_used == 1

    def test_empty_input(self) -> None:
        result = aggregate_picks([], 12)
        assert result.players == {}
        assert result.cells == {}
        assert result.picks_used == 0

    def test_same_name_different_position_are_distinct(self) -> None:
        picks = [make_pick(1, name="Taysom Hill", position="QB"), make_pick(40, name="Taysom Hill", position="TE")]
        result = aggregate_picks(picks, 12)
        assert set(result.players) == {"Taysom HillQB", "Taysom HillTE"}

    def test_team_count_drives_round_pick_format(self) -> None:
        result = aggregate_picks([make_pick(11, name="X", teams=10)], 10)
        assert result.players["XRB"].avg_round_pick == "2.01"

    def test_players_ordered_by_adp(self) -> None:
        result = aggregate_picks(_sample_draft(), 12)
        averages = [s.avg_overall_pick for s in result.players.values()]
        assert averages == sorted(averages)

    def test_pluggable_key_function(self) -> None:
        picks = [
            make_pick(10, name="DK Metcalf", position="WR", player_id="5846"),
            make_pick(20, name="D.K. Metcalf", position="WR", player_id="5846"),
        ]
        by_name = aggregate_picks(picks, 12)
        by_id = aggregate_picks(picks, 12, key_fn=player_id_key)
        assert len(by_name.players) == 2
        assert by_id.players["5846"].count == 2
        assert by_id.players["5846"].avg_overall_pick == 15.0

    def test_name_from_first_and_last(self) -> None:
        pick = DraftPick(
            pick_no=1,
            round=1,
            draft_slot=1,
            player_id="4034",
            metadata=PickMetadata(first_name="Christian", last_name="McCaffrey", position="RB"),
        )
        stat = aggregate_picks([pick], 12).players["Christian McCaffreyRB"]
        assert stat.name == "Christian McCaffrey"
        assert stat.position == "RB"


class TestDraftboardCells:
    def test_cell_keyed_by_round_and_slot(self) -> None:
        result = aggregate_picks(_sample_draft(), 12)
        assert set(result.cells) == {(1, 1), (1, 2), (1, 3), (2, 1), (2, 2)}
        cell = result.cells[(2, 2)]
        assert cell.total == 1
        assert cell.entries[0].name == "Josh Allen"
        assert cell.entries[0].pct == 1.0
        assert cell.entries[0].round_pick == "2.02"

    def test_entries_sorted_by_count_then_adp_then_name(self) -> None:
        picks = [
            make_pick(1, name="Chase", position="WR"),
            make_pick(1, name="Chase", position="WR"),
            make_pick(1, name="Zed", position="RB"),
            make_pick(1, name="Abe", position="RB"),
        ]
        cell = aggregate_picks(picks, 12).cells[(1, 1)]
        assert [e.name for e in cell.entries] == ["Chase", "Abe", "Zed"]
        assert cell.total == 4
        assert [e.pct for e in cell.entries] == [0.5, 0.25, 0.25]

    def test_average_breaks_count_ties(self) -> None:
        picks = [
            make_pick(13, name="Late", round=2, draft_slot=1),
            make_pick(12, name="Early", round=2, draft_slot=1),
        ]
        cell = aggregate_picks(picks, 12).cells[(2, 1)]
        assert [e.name for e in cell.entries] == ["Early", "Late"]


class TestDeterminism:
    def test_idempotent(self) -> None:
        picks = _sample_draft()
        assert aggregate_picks(picks, 12) == aggregate_picks(picks, 12)

    def test_accumulator_merge_is_order_independent(self) -> None:
        first = [make_pick(1, name="X"), make_pick(2, name="Y")]
        second = [make_pick(13, name="X"), make_pick(5, name="Z")]

        ab = AdpAccumulator()
        ab.add_all(first)
        other = AdpAccumulator()
        other.add_all(second)
        ab.merge(other)

        ba = AdpAccumulator()
        ba.add_all(second)
        other = AdpAccumulator()
        other.add_all(first)
        ba.merge(other)

        assert ab.finalize(12) == ba.finalize(12)

    def test_merge_matches_single_pass(self) -> None:
        picks = _sample_draft()
        left = AdpAccumulator()
        left.add_all(picks[:3])
        right = AdpAccumulator()
        right.add_all(picks[3:])
        left.merge(right)
        assert left.finalize(12) == aggregate_picks(picks, 12)
