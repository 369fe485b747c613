"""
Fantasy points API endpoints
"""
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.engine.scoring import ScoringEngine, PlayerMatchStats, PlayerRole, format_points
from app.models.match import Match, MatchStatus
from app.services.match_lookup import MatchSourceLookup
from app.services.points_service import PointsService, ScorecardLine
from app.api.schemas import (
    ScoreRequest, ScoreResponse, ScorecardRequest, ScorecardResponse, PendingMatch
)

router = APIRouter(prefix="/points", tags=["Points"])


def get_match_lookup() -> MatchSourceLookup:
    return MatchSourceLookup.from_settings()


@router.post("/score", response_model=ScoreResponse)
def score_player(data: ScoreRequest):
    """Score one stat line without touching the database"""
    stats = PlayerMatchStats.from_dict(data.stats.model_dump())
    breakdown = ScoringEngine.breakdown(stats, PlayerRole(data.role.value))
    return breakdown.to_dict() | {"total": format_points(breakdown.total)}


@router.post("/matches/{match_id}/scorecard", response_model=ScorecardResponse)
def ingest_scorecard(match_id: str, data: ScorecardRequest, db: Session = Depends(get_db)):
    """
    Store parsed scorecard lines for a match and refresh every fantasy
    team's total. Safe to call repeatedly with updated data.
    """
    lines = [
        ScorecardLine(
            stats=PlayerMatchStats.from_dict(p.stats.model_dump()),
            player_id=p.player_id,
            name=p.name,
        )
        for p in data.players
    ]

    try:
        update = PointsService(db).apply_scorecard(match_id, lines, completed=data.completed)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return ScorecardResponse(
        match_id=update.match_id,
        match_status=update.match_status.value,
        players_updated={k: format_points(v) for k, v in update.players_updated.items()},
        skipped=update.skipped,
        team_totals={k: format_points(v) for k, v in update.team_totals.items()},
    )


@router.get("/pending", response_model=List[PendingMatch])
def pending_matches(
    db: Session = Depends(get_db),
    lookup: MatchSourceLookup = Depends(get_match_lookup),
):
    """Matches that have started (or should have) and still need scorecard updates"""
    matches = db.query(Match).filter(
        Match.match_status.in_([MatchStatus.UPCOMING, MatchStatus.LIVE]),
        Match.match_date <= datetime.utcnow(),
    ).order_by(Match.match_date).all()

    return [
        PendingMatch(
            match_id=m.match_id,
            home_team_id=m.home_team_id,
            away_team_id=m.away_team_id,
            match_status=m.match_status.value,
            match_date=m.match_date,
            source_match_id=lookup.get(m.match_id),
        )
        for m in matches
    ]
