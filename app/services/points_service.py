"""
Points Service - stores scorecard lines and keeps fantasy team totals current
"""
import logging
import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Dict, List

from sqlalchemy.orm import Session

from app.engine.scoring import ScoringEngine, PlayerMatchStats, PlayerRole, format_points
from app.models.contest import Contest, ContestEnrollment, ContestStatus, EnrollmentStatus
from app.models.match import Match, MatchStatus
from app.models.performance import PlayerPerformance
from app.models.player import Player
from app.models.team import Squad
from app.models.user_team import UserTeam

logger = logging.getLogger(__name__)


@dataclass
class ScorecardLine:
    """One parsed scorecard row. Either player_id or name identifies the player."""
    stats: PlayerMatchStats
    player_id: Optional[str] = None
    name: Optional[str] = None


@dataclass
class ScorecardUpdate:
    match_id: str
    match_status: MatchStatus
    players_updated: Dict[str, Decimal] = field(default_factory=dict)
    skipped: List[str] = field(default_factory=list)
    team_totals: Dict[str, Decimal] = field(default_factory=dict)


class PointsService:
    """
    Records player performances for a match and recomputes every fantasy
    team's total from them. Recomputing is idempotent: rows are overwritten.
    """

    def __init__(self, session: Session, engine: Optional[ScoringEngine] = None):
        self.session = session
        self.engine = engine or ScoringEngine()

    def _get_match(self, match_id: str) -> Match:
        match = self.session.get(Match, match_id)
        if match is None:
            raise LookupError(f"Match {match_id} not found")
        return match

    def resolve_player(self, match: Match, name: str) -> Optional[Player]:
        """
        Find a squad player of either match team by scorecard name.
        Exact full name first, then a last-name match when it is unambiguous
        ("R Sharma" -> "Rohit Sharma").
        """
        name = (name or "").strip()
        if not name:
            return None

        candidates = (
            self.session.query(Player)
            .join(Squad, Squad.player_id == Player.player_id)
            .filter(Squad.team_id.in_([match.home_team_id, match.away_team_id]))
            .distinct()
        )

        exact = candidates.filter(Player.full_name == name).first()
        if exact:
            return exact

        parts = name.split()
        if len(parts) < 2:
            return None
        last_name = parts[-1]
        pattern = "% " + last_name.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        fuzzy = candidates.filter(Player.full_name.like(pattern, escape="\\")).limit(2).all()
        if len(fuzzy) == 1:
            logger.info("Using fuzzy match: %s -> %s", name, fuzzy[0].full_name)
            return fuzzy[0]
        if fuzzy:
            logger.warning("Ambiguous scorecard name %r, skipping", name)
        return None

    def record_performance(self, match_id: str, player_id: str, stats: PlayerMatchStats) -> PlayerPerformance:
        """Insert or overwrite the performance row and its base points."""
        performance = self.session.query(PlayerPerformance).filter_by(
            match_id=match_id, player_id=player_id
        ).first()
        if performance is None:
            performance = PlayerPerformance(
                performance_id=str(uuid.uuid4()),
                match_id=match_id,
                player_id=player_id,
            )
            self.session.add(performance)

        performance.apply_stats(stats)
        performance.total_fantasy_points = format_points(self.engine.score(stats, PlayerRole.NONE))
        self.session.flush()
        return performance

    def team_total(self, user_team: UserTeam, performances: Dict[str, PlayerPerformance]) -> Decimal:
        """Sum of each selected player's role-adjusted points."""
        total = Decimal(0)
        for selection in user_team.players:
            performance = performances.get(selection.player_id)
            if performance is None:
                continue
            total += self.engine.score(performance.to_stats(), selection.role)
        return total

    def recompute_team_totals(self, match_id: str) -> Dict[str, Decimal]:
        performances = {
            p.player_id: p
            for p in self.session.query(PlayerPerformance).filter_by(match_id=match_id).all()
        }

        totals = {}
        for user_team in self.session.query(UserTeam).filter_by(match_id=match_id).all():
            total = self.team_total(user_team, performances)
            user_team.total_points = format_points(total)
            totals[user_team.team_id] = total

        self.session.flush()
        return totals

    def rank_contests(self, match_id: str):
        """Rank active entries of every contest of the match by team total (1, 2, 2, 4)."""
        contests = self.session.query(Contest).filter_by(match_id=match_id).all()
        for contest in contests:
            entries = [e for e in contest.enrollments if e.status == EnrollmentStatus.ACTIVE]
            entries.sort(key=lambda e: Decimal(e.user_team.total_points or "0"), reverse=True)

            previous_points = None
            rank = 0
            for position, entry in enumerate(entries, start=1):
                points = Decimal(entry.user_team.total_points or "0")
                if points != previous_points:
                    rank = position
                    previous_points = points
                entry.rank = rank

        self.session.flush()

    def _advance_status(self, match: Match, completed: bool):
        if match.match_status == MatchStatus.CANCELED:
            return
        if completed:
            match.match_status = MatchStatus.COMPLETED
        elif match.match_status == MatchStatus.UPCOMING:
            match.match_status = MatchStatus.LIVE

        contests = self.session.query(Contest).filter_by(match_id=match.match_id).all()
        for contest in contests:
            if contest.status == ContestStatus.CANCELED:
                continue
            if match.match_status == MatchStatus.COMPLETED:
                contest.status = ContestStatus.COMPLETED
            elif contest.status == ContestStatus.CREATED:
                contest.status = ContestStatus.RUNNING

    def apply_scorecard(self, match_id: str, lines: List[ScorecardLine], completed: bool = False) -> ScorecardUpdate:
        """
        Store a parsed scorecard for a match, then refresh team totals,
        contest ranks and match status. Commits on success.
        """
        match = self._get_match(match_id)
        update = ScorecardUpdate(match_id=match_id, match_status=match.match_status)

        for line in lines:
            player = None
            if line.player_id:
                player = self.session.get(Player, line.player_id)
            elif line.name:
                player = self.resolve_player(match, line.name)

            if player is None:
                label = line.player_id or line.name or "<unnamed>"
                logger.info("Player %r not found, skipping performance update", label)
                update.skipped.append(label)
                continue

            performance = self.record_performance(match_id, player.player_id, line.stats)
            update.players_updated[player.player_id] = Decimal(performance.total_fantasy_points)

        update.team_totals = self.recompute_team_totals(match_id)
        self.rank_contests(match_id)
        self._advance_status(match, completed)
        update.match_status = match.match_status

        self.session.commit()
        logger.info(
            "Match %s: %d players updated, %d skipped, %d teams rescored (%s)",
            match_id, len(update.players_updated), len(update.skipped),
            len(update.team_totals), match.match_status.value,
        )
        return update

    def recompute(self, match_id: str) -> Dict[str, Decimal]:
        """Rescore stored performances without new scorecard data."""
        self._get_match(match_id)
        for performance in self.session.query(PlayerPerformance).filter_by(match_id=match_id).all():
            performance.total_fantasy_points = format_points(
                self.engine.score(performance.to_stats(), PlayerRole.NONE)
            )
        totals = self.recompute_team_totals(match_id)
        self.rank_contests(match_id)
        self.session.commit()
        return totals
