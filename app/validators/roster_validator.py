"""
Fantasy XI composition rules.

Rules, checked in this order, the first broken one is reported:
1. Exactly 11 players
2. No player picked twice
3. 5 or 6 players from each of the two match teams
4. Every player type present, none more than 5 times
5. Exactly one captain
6. Exactly one vice-captain
7. Captain and vice-captain are different players
"""
import enum
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional, List, Dict

from app.models.player import PlayerType

SQUAD_SIZE = 11
MIN_PER_TEAM = 5
MAX_PER_TEAM = 6
MIN_PER_TYPE = 1
MAX_PER_TYPE = 5


class RosterFailure(str, enum.Enum):
    WRONG_PLAYER_COUNT = "wrong player count"
    DUPLICATE_PLAYER = "duplicate player"
    INVALID_TEAM_DISTRIBUTION = "invalid team distribution"
    INVALID_TYPE_DISTRIBUTION = "invalid type distribution"
    INVALID_CAPTAIN = "invalid captain selection"
    INVALID_VICE_CAPTAIN = "invalid vice-captain selection"
    CAPTAIN_IS_VICE_CAPTAIN = "captain and vice-captain must differ"


@dataclass(frozen=True)
class RosterEntry:
    player_id: str
    origin_team_id: str
    player_type: PlayerType
    is_captain: bool = False
    is_vice_captain: bool = False


@dataclass
class ValidationResult:
    failure: Optional[RosterFailure] = None
    breakdown: Dict[str, Dict[str, int]] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return self.failure is None

    @property
    def message(self) -> str:
        return self.failure.value if self.failure else "valid"

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "failure": self.failure.name if self.failure else None,
            "message": self.message,
            "breakdown": self.breakdown,
        }


class RosterValidator:
    @staticmethod
    def breakdown(selection: List[RosterEntry]) -> Dict[str, Dict[str, int]]:
        by_type = Counter(e.player_type for e in selection)
        by_team = Counter(e.origin_team_id for e in selection)
        return {
            "types": {t.value: by_type.get(t, 0) for t in PlayerType},
            "teams": dict(by_team),
        }

    @staticmethod
    def _check_teams(selection: List[RosterEntry], team_a_id: Optional[str], team_b_id: Optional[str]) -> bool:
        by_team = Counter(e.origin_team_id for e in selection)
        if team_a_id is not None and team_b_id is not None:
            expected = {team_a_id, team_b_id}
            if len(expected) != 2 or set(by_team) != expected:
                return False
        elif len(by_team) != 2:
            return False
        return all(MIN_PER_TEAM <= n <= MAX_PER_TEAM for n in by_team.values())

    @staticmethod
    def _check_types(selection: List[RosterEntry]) -> bool:
        by_type = Counter(e.player_type for e in selection)
        return all(MIN_PER_TYPE <= by_type.get(t, 0) <= MAX_PER_TYPE for t in PlayerType)

    @classmethod
    def first_failure(
        cls,
        selection: List[RosterEntry],
        team_a_id: Optional[str] = None,
        team_b_id: Optional[str] = None,
    ) -> Optional[RosterFailure]:
        if len(selection) != SQUAD_SIZE:
            return RosterFailure.WRONG_PLAYER_COUNT

        if len({e.player_id for e in selection}) != len(selection):
            return RosterFailure.DUPLICATE_PLAYER

        if not cls._check_teams(selection, team_a_id, team_b_id):
            return RosterFailure.INVALID_TEAM_DISTRIBUTION

        if not cls._check_types(selection):
            return RosterFailure.INVALID_TYPE_DISTRIBUTION

        captains = [e for e in selection if e.is_captain]
        if len(captains) != 1:
            return RosterFailure.INVALID_CAPTAIN

        vice_captains = [e for e in selection if e.is_vice_captain]
        if len(vice_captains) != 1:
            return RosterFailure.INVALID_VICE_CAPTAIN

        if captains[0].player_id == vice_captains[0].player_id:
            return RosterFailure.CAPTAIN_IS_VICE_CAPTAIN

        return None

    @classmethod
    def validate(
        cls,
        selection: List[RosterEntry],
        team_a_id: Optional[str] = None,
        team_b_id: Optional[str] = None,
    ) -> ValidationResult:
        """
        Validate a fantasy XI against the two teams of its match.

        When the team ids are omitted the two teams present in the
        selection are used.
        """
        selection = list(selection)
        return ValidationResult(
            failure=cls.first_failure(selection, team_a_id, team_b_id),
            breakdown=cls.breakdown(selection),
        )


def validate(
    selection: List[RosterEntry],
    team_a_id: Optional[str] = None,
    team_b_id: Optional[str] = None,
) -> ValidationResult:
    return RosterValidator.validate(selection, team_a_id, team_b_id)
