"""
Tests for fantasy XI composition rules.

Run with: pytest tests/test_roster_validator.py -v
"""
from dataclasses import replace

from app.models.player import PlayerType
from app.validators.roster_validator import RosterValidator, RosterEntry, RosterFailure, validate


def create_roster() -> list[RosterEntry]:
    """A legal XI: 6 from team A, 5 from team B, captain A1, vice-captain B3."""
    layout = [
        ("A1", "A", PlayerType.BATSMAN),
        ("A2", "A", PlayerType.BATSMAN),
        ("A3", "A", PlayerType.WICKET_KEEPER),
        ("A4", "A", PlayerType.ALL_ROUNDER),
        ("A5", "A", PlayerType.BOWLER),
        ("A6", "A", PlayerType.BOWLER),
        ("B1", "B", PlayerType.BATSMAN),
        ("B2", "B", PlayerType.BATSMAN),
        ("B3", "B", PlayerType.ALL_ROUNDER),
        ("B4", "B", PlayerType.BOWLER),
        ("B5", "B", PlayerType.BOWLER),
    ]
    return [
        RosterEntry(
            player_id=pid,
            origin_team_id=team,
            player_type=ptype,
            is_captain=pid == "A1",
            is_vice_captain=pid == "B3",
        )
        for pid, team, ptype in layout
    ]


def set_entry(roster, index, **changes):
    roster = list(roster)
    roster[index] = replace(roster[index], **changes)
    return roster


class TestValidRoster:
    def test_legal_roster_is_valid(self):
        result = validate(create_roster(), "A", "B")
        assert result.valid, f"Expected valid roster, got: {result.message}"
        assert result.failure is None

    def test_five_six_split_either_way(self):
        roster = set_entry(create_roster(), 5, origin_team_id="B")  # 5-6
        assert validate(roster, "A", "B").valid

    def test_team_ids_inferred_when_omitted(self):
        assert RosterValidator.validate(create_roster()).valid

    def test_breakdown(self):
        result = validate(create_roster(), "A", "B")
        assert result.breakdown["types"] == {
            "BATSMAN": 4, "BOWLER": 4, "ALL_ROUNDER": 2, "WICKET_KEEPER": 1,
        }
        assert result.breakdown["teams"] == {"A": 6, "B": 5}

    def test_to_dict(self):
        data = validate(create_roster(), "A", "B").to_dict()
        assert data["valid"] is True
        assert data["failure"] is None


class TestPlayerCount:
    def test_ten_players(self):
        result = validate(create_roster()[:10], "A", "B")
        assert result.failure == RosterFailure.WRONG_PLAYER_COUNT
        assert result.message == "wrong player count"

    def test_twelve_players(self):
        roster = create_roster() + [RosterEntry("B6", "B", PlayerType.BOWLER)]
        assert validate(roster, "A", "B").failure == RosterFailure.WRONG_PLAYER_COUNT

    def test_empty_roster(self):
        assert validate([], "A", "B").failure == RosterFailure.WRONG_PLAYER_COUNT


class TestDuplicatePlayer:
    def test_same_player_twice(self):
        roster = set_entry(create_roster(), 1, player_id="A1", is_captain=False)
        result = validate(roster, "A", "B")
        assert result.failure == RosterFailure.DUPLICATE_PLAYER
        assert result.message == "duplicate player"


class TestTeamDistribution:
    def test_seven_four_split(self):
        roster = set_entry(create_roster(), 6, origin_team_id="A")
        result = validate(roster, "A", "B")
        assert result.failure == RosterFailure.INVALID_TEAM_DISTRIBUTION
        assert result.message == "invalid team distribution"

    def test_player_from_third_team(self):
        roster = set_entry(create_roster(), 10, origin_team_id="C")
        assert validate(roster, "A", "B").failure == RosterFailure.INVALID_TEAM_DISTRIBUTION

    def test_roster_teams_differ_from_match_teams(self):
        assert validate(create_roster(), "A", "Z").failure == RosterFailure.INVALID_TEAM_DISTRIBUTION

    def test_single_team_without_match_ids(self):
        roster = [replace(e, origin_team_id="A") for e in create_roster()]
        assert RosterValidator.validate(roster).failure == RosterFailure.INVALID_TEAM_DISTRIBUTION


class TestTypeDistribution:
    def test_no_wicket_keeper(self):
        roster = set_entry(create_roster(), 2, player_type=PlayerType.BATSMAN)
        result = validate(roster, "A", "B")
        assert result.failure == RosterFailure.INVALID_TYPE_DISTRIBUTION
        assert result.message == "invalid type distribution"

    def test_six_bowlers(self):
        roster = create_roster()
        for i in (0, 1):
            roster = set_entry(roster, i, player_type=PlayerType.BOWLER)
        assert validate(roster, "A", "B").failure == RosterFailure.INVALID_TYPE_DISTRIBUTION

    def test_five_of_a_type_allowed(self):
        roster = set_entry(create_roster(), 1, player_type=PlayerType.BOWLER)  # 5 bowlers
        assert validate(roster, "A", "B").valid


class TestCaptaincy:
    def test_two_captains(self):
        roster = set_entry(create_roster(), 1, is_captain=True)
        result = validate(roster, "A", "B")
        assert result.failure == RosterFailure.INVALID_CAPTAIN
        assert result.message == "invalid captain selection"

    def test_no_captain(self):
        roster = set_entry(create_roster(), 0, is_captain=False)
        assert validate(roster, "A", "B").failure == RosterFailure.INVALID_CAPTAIN

    def test_two_vice_captains(self):
        roster = set_entry(create_roster(), 7, is_vice_captain=True)
        result = validate(roster, "A", "B")
        assert result.failure == RosterFailure.INVALID_VICE_CAPTAIN
        assert result.message == "invalid vice-captain selection"

    def test_no_vice_captain(self):
        roster = set_entry(create_roster(), 8, is_vice_captain=False)
        assert validate(roster, "A", "B").failure == RosterFailure.INVALID_VICE_CAPTAIN

    def test_captain_is_vice_captain(self):
        roster = set_entry(create_roster(), 8, is_vice_captain=False)
        roster = set_entry(roster, 0, is_vice_captain=True)
        result = validate(roster, "A", "B")
        assert result.failure == RosterFailure.CAPTAIN_IS_VICE_CAPTAIN
        assert result.message == "captain and vice-captain must differ"


class TestCheckOrder:
    """Only the first broken rule is reported."""

    def test_count_before_captaincy(self):
        roster = set_entry(create_roster(), 1, is_captain=True)[:10]
        assert validate(roster, "A", "B").failure == RosterFailure.WRONG_PLAYER_COUNT

    def test_duplicate_before_team_distribution(self):
        roster = set_entry(create_roster(), 6, player_id="A1", origin_team_id="A", is_vice_captain=False)
        assert validate(roster, "A", "B").failure == RosterFailure.DUPLICATE_PLAYER

    def test_team_before_type_distribution(self):
        roster = set_entry(create_roster(), 6, origin_team_id="A", player_type=PlayerType.WICKET_KEEPER)
        roster = set_entry(roster, 2, player_type=PlayerType.BATSMAN)
        assert validate(roster, "A", "B").failure == RosterFailure.INVALID_TEAM_DISTRIBUTION

    def test_type_before_captaincy(self):
        roster = set_entry(create_roster(), 2, player_type=PlayerType.BATSMAN, is_captain=True)
        assert validate(roster, "A", "B").failure == RosterFailure.INVALID_TYPE_DISTRIBUTION

    def test_captain_before_vice_captain(self):
        roster = set_entry(create_roster(), 0, is_captain=False)
        roster = set_entry(roster, 8, is_vice_captain=False)
        assert validate(roster, "A", "B").failure == RosterFailure.INVALID_CAPTAIN
