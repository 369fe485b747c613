"""
Tests for the fantasy points table and captain/vice-captain multipliers.

Run with: pytest tests/test_scoring_engine.py -v
"""
from decimal import Decimal

import pytest

from app.engine.scoring import (
    ScoringEngine, PlayerMatchStats, PlayerRole, score, format_points
)


SAMPLE_LINES = [
    PlayerMatchStats(),
    PlayerMatchStats(runs=37, fours=3, sixes=2),
    PlayerMatchStats(runs=112, fours=10, sixes=6, catches=1),
    PlayerMatchStats(wickets=2, maidens=1, run_outs=1),
    PlayerMatchStats(runs=1, wickets=1, catches=1),
    PlayerMatchStats(stumpings=1, catches=3),
]


class TestBatting:
    def test_zero_stats_score_zero(self):
        assert score(PlayerMatchStats(), PlayerRole.NONE) == 0

    def test_no_half_century_bonus_at_49(self):
        assert score(PlayerMatchStats(runs=49)) == 49

    def test_half_century_bonus_at_50(self):
        assert score(PlayerMatchStats(runs=50)) == 75

    def test_half_century_bonus_at_99(self):
        assert score(PlayerMatchStats(runs=99)) == 124

    def test_century_bonus_replaces_half_century(self):
        assert score(PlayerMatchStats(runs=100)) == 150

    def test_boundaries_and_sixes(self):
        # 30 runs + 4 fours + 2*2 sixes
        assert score(PlayerMatchStats(runs=30, fours=4, sixes=2)) == 38

    def test_boundaries_ignored_without_runs(self):
        """Batting block is skipped entirely when runs is zero."""
        assert score(PlayerMatchStats(runs=0, fours=4, sixes=2)) == 0


class TestBowling:
    def test_wickets_and_maidens(self):
        assert score(PlayerMatchStats(wickets=3, maidens=1)) == 3 * 25 + 12

    def test_maidens_ignored_without_wickets(self):
        assert score(PlayerMatchStats(wickets=0, maidens=3)) == 0


class TestFielding:
    def test_fielding_points(self):
        stats = PlayerMatchStats(catches=2, run_outs=1, stumpings=1)
        assert score(stats) == 2 * 8 + 10 + 12

    def test_fielding_counts_without_batting_or_bowling(self):
        stats = PlayerMatchStats(fours=2, maidens=1, catches=1)
        assert score(stats) == 8


class TestRoleMultiplier:
    @pytest.mark.parametrize("stats", SAMPLE_LINES)
    def test_captain_doubles_whole_base(self, stats):
        assert score(stats, PlayerRole.CAPTAIN) == 2 * score(stats, PlayerRole.NONE)

    @pytest.mark.parametrize("stats", SAMPLE_LINES)
    def test_vice_captain_one_and_a_half(self, stats):
        assert score(stats, PlayerRole.VICE_CAPTAIN) == Decimal("1.5") * score(stats, PlayerRole.NONE)

    def test_vice_captain_keeps_fraction(self):
        result = score(PlayerMatchStats(wickets=3, maidens=1), PlayerRole.VICE_CAPTAIN)
        assert result == Decimal("130.5")
        assert format_points(result) == "130.5"

    def test_role_from_flags(self):
        assert PlayerRole.from_flags(True, False) == PlayerRole.CAPTAIN
        assert PlayerRole.from_flags(False, True) == PlayerRole.VICE_CAPTAIN
        assert PlayerRole.from_flags(False, False) == PlayerRole.NONE


class TestPurity:
    def test_same_input_same_output(self):
        stats = PlayerMatchStats(runs=64, fours=7, sixes=1, catches=1)
        first = score(stats, PlayerRole.CAPTAIN)
        second = score(stats, PlayerRole.CAPTAIN)
        assert first == second

    def test_breakdown_matches_score(self):
        stats = PlayerMatchStats(runs=55, fours=5, wickets=2, maidens=1, catches=1)
        breakdown = ScoringEngine.breakdown(stats, PlayerRole.VICE_CAPTAIN)
        assert breakdown.batting == 55 + 5 + 25
        assert breakdown.bowling == 50 + 12
        assert breakdown.fielding == 8
        assert breakdown.total == score(stats, PlayerRole.VICE_CAPTAIN)


class TestStatsFromDict:
    def test_missing_fields_default_to_zero(self):
        assert PlayerMatchStats.from_dict({"runs": 12}) == PlayerMatchStats(runs=12)
        assert PlayerMatchStats.from_dict(None) == PlayerMatchStats()

    def test_camel_case_keys(self):
        stats = PlayerMatchStats.from_dict({"runOuts": 1, "wicketsTaken": 2, "ballsFaced": 9})
        assert stats.run_outs == 1
        assert stats.wickets == 2
        assert stats.balls_faced == 9

    def test_malformed_values_become_zero(self):
        stats = PlayerMatchStats.from_dict({"runs": "abc", "fours": None, "sixes": -2, "catches": "3"})
        assert stats.runs == 0
        assert stats.fours == 0
        assert stats.sixes == 0
        assert stats.catches == 3

    @pytest.mark.parametrize("value,expected", [
        ("inf", 0),
        ("-inf", 0),
        ("nan", 0),
        (float("inf"), 0),
        (float("nan"), 0),
        ("1e400", 10 ** 400),
        ("12.0", 12),
        (" 7 ", 7),
        (12.9, 12),
        (True, 0),
        (False, 0),
        ([4], 0),
        (2 ** 53 + 1, 2 ** 53 + 1),
        (10 ** 400, 10 ** 400),
    ])
    def test_numeric_edge_values(self, value, expected):
        stats = PlayerMatchStats.from_dict({"runs": value, "catches": 1})
        assert stats.runs == expected
        assert stats.catches == 1

    def test_non_finite_runs_still_score_fielding(self):
        stats = PlayerMatchStats.from_dict({"runs": "inf", "fours": "nan", "catches": 1})
        assert score(stats, PlayerRole.NONE) == 8

    def test_unknown_keys_ignored(self):
        stats = PlayerMatchStats.from_dict({"runs": 5, "dismissal": "c Dhoni b Jadeja"})
        assert stats == PlayerMatchStats(runs=5)


class TestFormatPoints:
    def test_whole_numbers_have_no_fraction(self):
        assert format_points(Decimal("15.0")) == "15"
        assert format_points(Decimal(0) * Decimal("1.5")) == "0"

    def test_large_whole_numbers_stay_plain(self):
        assert format_points(Decimal("300")) == "300"
