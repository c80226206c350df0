import math

import pytest

from sleeper_adp.domain.round_pick import (
    PLACEHOLDER,
    format_avg_round_pick,
    format_round_pick,
    normalize_teams,
    parse_round_pick,
    round_pick_sort_key,
    round_pick_to_overall,
)


class TestFormatRoundPick:
    @pytest.mark.parametrize(
        ("pick", "teams", "expected"),
        [
            (1, 12, "1.01"),
            (12, 12, "1.12"),
            (13, 12, "2.01"),
            (24, 12, "2.12"),
            (109, 12, "10.01"),
            (11, 10, "2.01"),
        ],
    )
    def test_whole_picks(self, pick: int, teams: int, expected: str) -> None:
        assert format_round_pick(pick, teams) == expected

    def test_fractional_pick_appends_hundredths(self) -> None:
        assert format_round_pick(14.5, 12) == "2.02.50"

    @pytest.mark.parametrize(
        ("pick", "expected"),
        [(12.996, "2.01"), (12.994, "1.12.99"), (24.999, "3.01"), (5.999, "1.06")],
    )
    def test_fraction_rounding_carries_into_next_slot(self, pick: float, expected: str) -> None:
        assert format_round_pick(pick, 12) == expected

    def test_three_digit_slot(self) -> None:
        assert format_round_pick(100, 100) == "1.100"
        assert format_round_pick(250, 120) == "3.10"

    @pytest.mark.parametrize("pick", [0, -3, math.nan, math.inf, None])
    def test_invalid_pick_renders_placeholder(self, pick: float | None) -> None:
        assert format_round_pick(pick, 12) == PLACEHOLDER

    @pytest.mark.parametrize("teams", [0, -4, None])
    def test_non_positive_teams_default_to_twelve(self, teams: int | None) -> None:
        assert format_round_pick(13, teams) == "2.01"
        assert normalize_teams(teams) == 12


class TestFormatAvgRoundPick:
    def test_rounds_average_before_formatting(self) -> None:
        assert format_avg_round_pick(7.0, 12) == "1.07"
        assert format_avg_round_pick(12.4, 12) == "1.12"
        assert format_avg_round_pick(12.6, 12) == "2.01"

    def test_half_rounds_up(self) -> None:
        assert format_avg_round_pick(6.5, 12) == "1.07"

    def test_never_emits_fractional_group(self) -> None:
        assert format_avg_round_pick(14.5, 12).count(".") == 1

    def test_invalid_average(self) -> None:
        assert format_avg_round_pick(math.nan, 12) == PLACEHOLDER
        assert format_avg_round_pick(0.0, 12) == PLACEHOLDER


class TestParseRoundPick:
    def test_parses_parts(self) -> None:
        assert parse_round_pick("3.04") == (3, 4, 0)
        assert parse_round_pick("2.02.50") == (2, 2, 50)
        assert parse_round_pick("1.100") == (1, 100, 0)

    @pytest.mark.parametrize("text", [PLACEHOLDER, "", None, "abc", "3", "0.01", "1.00", "1.2.3.4"])
    def test_rejects_malformed(self, text: str | None) -> None:
        assert parse_round_pick(text) is None


class TestSortKey:
    def test_round_ten_sorts_after_round_nine(self) -> None:
        assert round_pick_sort_key("9.12") < round_pick_sort_key("10.01")

    def test_fraction_adds_hundredths(self) -> None:
        assert round_pick_sort_key("1.01.50") == pytest.approx(1001.5)

    def test_placeholder_sorts_last(self) -> None:
        assert round_pick_sort_key(PLACEHOLDER) == math.inf
        assert round_pick_sort_key("garbage") == math.inf
        ordered = sorted(["—", "2.01", "1.12"], key=round_pick_sort_key)
        assert ordered == ["1.12", "2.01", "—"]


class TestRoundTrip:
    @pytest.mark.parametrize("teams", [8, 10, 12, 14])
    def test_decode_recovers_overall_pick(self, teams: int) -> None:
        for pick in range(1, teams * 20 + 1):
            assert round_pick_to_overall(format_round_pick(pick, teams), teams) == pick

    def test_decode_placeholder_is_none(self) -> None:
        assert round_pick_to_overall(PLACEHOLDER, 12) is None

    @pytest.mark.parametrize("teams", [100, 150])
    def test_large_leagues_round_trip(self, teams: int) -> None:
        for pick in range(1, teams * 3 + 1):
            assert round_pick_to_overall(format_round_pick(pick, teams), teams) == pick

    def test_three_digit_slot_sorts_numerically(self) -> None:
        ordered = sorted(["2.01", "1.100", "1.99"], key=round_pick_sort_key)
        assert ordered == ["1.99", "1.100", "2.01"]
