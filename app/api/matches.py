"""
Match schedule API endpoints
"""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.match import Match, MatchStatus
from app.models.team import Team
from app.api.schemas import MatchResponse, ScheduleResponse, TeamResponse

router = APIRouter(prefix="/matches", tags=["Matches"])


def team_brief(team: Optional[Team]) -> Optional[TeamResponse]:
    return TeamResponse.model_validate(team) if team else None


def match_to_response(match: Match) -> MatchResponse:
    return MatchResponse(
        match_id=match.match_id,
        home_team=team_brief(match.home_team),
        away_team=team_brief(match.away_team),
        match_date=match.match_date,
        match_type=match.match_type.value,
        venue=match.venue,
        match_status=match.match_status.value,
    )


def get_match_or_404(db: Session, match_id: str) -> Match:
    match = db.get(Match, match_id)
    if not match:
        raise HTTPException(status_code=404, detail="Match not found")
    return match


@router.get("/schedule", response_model=ScheduleResponse)
def get_schedule(db: Session = Depends(get_db)):
    """Upcoming matches from now on, soonest first"""
    matches = db.query(Match).filter(
        Match.match_status == MatchStatus.UPCOMING,
        Match.match_date >= datetime.utcnow(),
    ).order_by(Match.match_date).all()

    return ScheduleResponse(
        matches=[match_to_response(m) for m in matches],
        count=len(matches),
    )


@router.get("/{match_id}", response_model=MatchResponse)
def get_match(match_id: str, db: Session = Depends(get_db)):
    return match_to_response(get_match_or_404(db, match_id))
