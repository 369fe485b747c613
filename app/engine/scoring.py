"""
Fantasy points scoring.

Turns one player's scorecard line into fantasy points. The point table is
fixed; the captain/vice-captain multiplier is applied here, once, to the
whole base. Callers that add up a fantasy team's total must sum the values
returned by ``score`` and never multiply again.
"""
import enum
from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation
from typing import Optional


# Batting
RUN_POINTS = 1
BOUNDARY_BONUS = 1
SIX_BONUS = 2
HALF_CENTURY_BONUS = 25
CENTURY_BONUS = 50

# Bowling
WICKET_POINTS = 25
MAIDEN_OVER_BONUS = 12

# Fielding
CATCH_POINTS = 8
RUNOUT_POINTS = 10
STUMPING_POINTS = 12


class PlayerRole(enum.Enum):
    NONE = "none"
    CAPTAIN = "captain"
    VICE_CAPTAIN = "vice_captain"

    @classmethod
    def from_flags(cls, is_captain: bool, is_vice_captain: bool) -> "PlayerRole":
        if is_captain:
            return cls.CAPTAIN
        if is_vice_captain:
            return cls.VICE_CAPTAIN
        return cls.NONE


ROLE_MULTIPLIERS = {
    PlayerRole.NONE: Decimal("1"),
    PlayerRole.CAPTAIN: Decimal("2"),
    PlayerRole.VICE_CAPTAIN: Decimal("1.5"),
}


def _count(value) -> int:
    """Coerce a scorecard value to a non-negative int; anything unusable is 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    try:
        n = int(value)
    except (TypeError, ValueError, OverflowError):
        try:
            d = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return 0
        if not d.is_finite():
            return 0
        n = int(d)
    return max(n, 0)


# camelCase keys as sent by scorecard feeds
_ALIASES = {
    "ballsFaced": "balls_faced",
    "wicketsTaken": "wickets",
    "wickets_taken": "wickets",
    "runsScored": "runs",
    "runs_scored": "runs",
    "runOuts": "run_outs",
    "oversBowled": "overs_bowled",
    "strikeRate": "strike_rate",
    "economyRate": "economy_rate",
    "economy": "economy_rate",
    "balls": "balls_faced",
    "overs": "overs_bowled",
}

_TEXT_FIELDS = ("overs_bowled", "strike_rate", "economy_rate")


@dataclass(frozen=True)
class PlayerMatchStats:
    runs: int = 0
    balls_faced: int = 0
    fours: int = 0
    sixes: int = 0
    wickets: int = 0
    maidens: int = 0
    catches: int = 0
    run_outs: int = 0
    stumpings: int = 0

    # Informational only, never scored
    overs_bowled: str = "0"
    strike_rate: str = "0"
    economy_rate: str = "0"

    @classmethod
    def from_dict(cls, d: Optional[dict]) -> "PlayerMatchStats":
        """Build stats from a loosely-typed mapping. Missing or malformed numbers become 0."""
        values = {}
        for key, value in (d or {}).items():
            name = _ALIASES.get(key, key)
            values[name] = value

        kwargs = {}
        for f in fields(cls):
            if f.name not in values:
                continue
            raw = values[f.name]
            if f.name in _TEXT_FIELDS:
                kwargs[f.name] = str(raw) if raw is not None else "0"
            else:
                kwargs[f.name] = _count(raw)
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class PointsBreakdown:
    batting: int
    bowling: int
    fielding: int
    multiplier: Decimal
    total: Decimal

    @property
    def base(self) -> int:
        return self.batting + self.bowling + self.fielding

    def to_dict(self) -> dict:
        return {
            "batting": self.batting,
            "bowling": self.bowling,
            "fielding": self.fielding,
            "base": self.base,
            "multiplier": str(self.multiplier),
            "total": str(self.total),
        }


class ScoringEngine:
    """Stateless; safe to share between threads."""

    @staticmethod
    def batting_points(stats: PlayerMatchStats) -> int:
        # Boundary and six bonuses only count when the player scored runs
        if not stats.runs:
            return 0
        points = stats.runs * RUN_POINTS
        points += stats.fours * BOUNDARY_BONUS
        points += stats.sixes * SIX_BONUS
        if 50 <= stats.runs < 100:
            points += HALF_CENTURY_BONUS
        elif stats.runs >= 100:
            points += CENTURY_BONUS
        return points

    @staticmethod
    def bowling_points(stats: PlayerMatchStats) -> int:
        # Maidens only count alongside at least one wicket
        if not stats.wickets:
            return 0
        return stats.wickets * WICKET_POINTS + stats.maidens * MAIDEN_OVER_BONUS

    @staticmethod
    def fielding_points(stats: PlayerMatchStats) -> int:
        return (
            stats.catches * CATCH_POINTS
            + stats.run_outs * RUNOUT_POINTS
            + stats.stumpings * STUMPING_POINTS
        )

    @classmethod
    def base_points(cls, stats: PlayerMatchStats) -> int:
        return cls.batting_points(stats) + cls.bowling_points(stats) + cls.fielding_points(stats)

    @classmethod
    def breakdown(cls, stats: PlayerMatchStats, role: PlayerRole = PlayerRole.NONE) -> PointsBreakdown:
        batting = cls.batting_points(stats)
        bowling = cls.bowling_points(stats)
        fielding = cls.fielding_points(stats)
        multiplier = ROLE_MULTIPLIERS[role]
        return PointsBreakdown(
            batting=batting,
            bowling=bowling,
            fielding=fielding,
            multiplier=multiplier,
            total=Decimal(batting + bowling + fielding) * multiplier,
        )

    @classmethod
    def score(cls, stats: PlayerMatchStats, role: PlayerRole = PlayerRole.NONE) -> Decimal:
        return Decimal(cls.base_points(stats)) * ROLE_MULTIPLIERS[role]


def score(stats: PlayerMatchStats, role: PlayerRole = PlayerRole.NONE) -> Decimal:
    return ScoringEngine.score(stats, role)


def format_points(points: Decimal) -> str:
    """Exact decimal string for storage, without a trailing '.0' on whole numbers."""
    if points == points.to_integral_value():
        return str(points.quantize(Decimal(1)))
    return str(points.normalize())
