"""
Real team and squad API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.player import Player, PlayerType
from app.models.team import Team, Squad
from app.api.schemas import TeamResponse, SquadResponse, SquadPlayerResponse

router = APIRouter(prefix="/teams", tags=["Teams"])


def player_brief(player: Player) -> SquadPlayerResponse:
    return SquadPlayerResponse(
        player_id=player.player_id,
        full_name=player.full_name,
        country=player.country,
        player_type=player.player_type.value,
        player_role=player.player_role,
        batting_style=player.batting_style,
        bowling_style=player.bowling_style,
        base_credit_value=player.base_credit_value,
    )


@router.get("", response_model=List[TeamResponse])
def list_teams(db: Session = Depends(get_db)):
    return db.query(Team).order_by(Team.team_name).all()


@router.get("/{team_id}/squad", response_model=SquadResponse)
def get_squad(team_id: str, db: Session = Depends(get_db)):
    """Active squad grouped by player type"""
    team = db.get(Team, team_id)
    if not team:
        raise HTTPException(status_code=404, detail="Team not found")

    players = db.query(Player).join(Squad, Squad.player_id == Player.player_id).filter(
        Squad.team_id == team_id,
        Squad.is_active.is_(True),
    ).order_by(Player.full_name).all()

    grouped = {t.value: [] for t in PlayerType}
    for player in players:
        grouped[player.player_type.value].append(player_brief(player))

    return SquadResponse(
        team=TeamResponse.model_validate(team),
        squad=grouped,
        total_players=len(players),
    )
