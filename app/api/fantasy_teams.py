"""
Fantasy team API endpoints: create, update, enroll and validate a user's XI
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import update
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.contest import Contest, ContestEnrollment, ContestStatus, EnrollmentStatus
from app.models.match import Match
from app.models.player import Player
from app.models.team import Squad
from app.models.user import User
from app.models.user_team import UserTeam, UserTeamPlayer
from app.validators.roster_validator import RosterValidator, RosterEntry, ValidationResult
from app.api.matches import get_match_or_404
from app.api.schemas import (
    PlayerPick, FantasyTeamCreate, FantasyTeamUpdate, FantasyTeamEnroll,
    RosterValidateRequest, RosterValidationResponse, FantasyTeamResponse,
    FantasyTeamPlayerResponse, FantasyTeamCreated, FantasyTeamUpdated
)

router = APIRouter(prefix="/fantasy-teams", tags=["Fantasy Teams"])


def build_roster(db: Session, match: Match, picks: List[PlayerPick]) -> List[RosterEntry]:
    """
    Resolve picks against the active squads of the two match teams.
    Raises 400 if any pick is not available for this match.
    """
    player_ids = sorted({p.player_id for p in picks})
    rows = db.query(Squad, Player).join(Player, Squad.player_id == Player.player_id).filter(
        Squad.player_id.in_(player_ids),
        Squad.team_id.in_([match.home_team_id, match.away_team_id]),
        Squad.is_active.is_(True),
    ).all()

    available = {}
    for squad, player in rows:
        available.setdefault(player.player_id, (squad.team_id, player.player_type))

    missing = [p.player_id for p in picks if p.player_id not in available]
    if missing:
        raise HTTPException(
            status_code=400,
            detail=f"One or more players are not valid for this match: {', '.join(sorted(set(missing)))}"
        )

    return [
        RosterEntry(
            player_id=pick.player_id,
            origin_team_id=available[pick.player_id][0],
            player_type=available[pick.player_id][1],
            is_captain=pick.is_captain,
            is_vice_captain=pick.is_vice_captain,
        )
        for pick in picks
    ]


def validate_picks(db: Session, match: Match, picks: List[PlayerPick]) -> ValidationResult:
    roster = build_roster(db, match, picks)
    return RosterValidator.validate(roster, match.home_team_id, match.away_team_id)


def require_valid(result: ValidationResult):
    if not result.valid:
        raise HTTPException(status_code=400, detail=result.message)


def set_players(team: UserTeam, picks: List[PlayerPick]):
    for pick in picks:
        team.players.append(UserTeamPlayer(
            player_id=pick.player_id,
            is_captain=pick.is_captain,
            is_vice_captain=pick.is_vice_captain,
        ))


def check_contest_open(contest: Contest):
    if contest.status != ContestStatus.CREATED:
        raise HTTPException(status_code=400, detail="Contest is no longer accepting entries")
    if contest.is_full:
        raise HTTPException(status_code=400, detail="Contest is full")


def enroll(db: Session, team: UserTeam, contest: Contest) -> ContestEnrollment:
    # Guarded increment: no row updated means the last spot is already taken
    claimed = db.execute(
        update(Contest)
        .where(
            Contest.contest_id == contest.contest_id,
            Contest.status == ContestStatus.CREATED,
            Contest.filled_spots < Contest.total_spots,
        )
        .values(filled_spots=Contest.filled_spots + 1)
        .execution_options(synchronize_session=False)
    )
    if claimed.rowcount != 1:
        raise HTTPException(status_code=400, detail="Contest is full")

    enrollment = ContestEnrollment(
        enrollment_id=str(uuid.uuid4()),
        contest_id=contest.contest_id,
        user_team_id=team.team_id,
        user_id=team.user_id,
        status=EnrollmentStatus.ACTIVE,
    )
    db.add(enrollment)
    return enrollment


def get_owned_team(db: Session, team_id: str, user_id: int) -> UserTeam:
    team = db.query(UserTeam).filter_by(team_id=team_id, user_id=user_id).first()
    if not team:
        raise HTTPException(status_code=404, detail="Team not found or doesn't belong to the user")
    return team


@router.post("/validate", response_model=RosterValidationResponse)
def validate_team(data: RosterValidateRequest, db: Session = Depends(get_db)):
    """Check a selection without saving it"""
    match = get_match_or_404(db, data.match_id)
    return validate_picks(db, match, data.players).to_dict()


@router.post("", response_model=FantasyTeamCreated)
def create_team(data: FantasyTeamCreate, db: Session = Depends(get_db)):
    """
    Create a fantasy team and enroll it in a contest.
    The match must not have started.
    """
    if not db.get(User, data.user_id):
        raise HTTPException(status_code=404, detail="User not found")

    contest = db.get(Contest, data.contest_id)
    if not contest:
        raise HTTPException(status_code=404, detail="Contest not found")
    if contest.match_id != data.match_id:
        raise HTTPException(status_code=400, detail="Contest is not for the specified match")

    match = db.get(Match, data.match_id)
    if not match or not match.is_open_for_teams:
        raise HTTPException(status_code=400, detail="Match not found or is not upcoming")

    check_contest_open(contest)
    require_valid(validate_picks(db, match, data.players))

    team = UserTeam(
        team_id=str(uuid.uuid4()),
        user_id=data.user_id,
        match_id=data.match_id,
        team_name=data.team_name,
        total_points="0",
    )
    db.add(team)
    set_players(team, data.players)
    db.flush()

    enrollment = enroll(db, team, contest)
    db.commit()

    return FantasyTeamCreated(
        team_id=team.team_id,
        team_name=team.team_name,
        match_id=team.match_id,
        contest_id=contest.contest_id,
        player_count=len(data.players),
        enrollment_id=enrollment.enrollment_id,
    )


@router.patch("/{team_id}", response_model=FantasyTeamUpdated)
def update_team(team_id: str, data: FantasyTeamUpdate, db: Session = Depends(get_db)):
    """Rename a team and/or replace its players before the match starts"""
    team = get_owned_team(db, team_id, data.user_id)

    match = db.get(Match, team.match_id)
    if not match or not match.is_open_for_teams:
        raise HTTPException(status_code=400, detail="Cannot update team after match has started")

    updates = []
    player_count = None

    if data.team_name and data.team_name != team.team_name:
        team.team_name = data.team_name
        updates.append("Team name updated")

    if data.players is not None:
        require_valid(validate_picks(db, match, data.players))
        team.players.clear()
        db.flush()
        set_players(team, data.players)
        player_count = len(data.players)
        updates.append("Team players updated")

    if not updates:
        raise HTTPException(status_code=400, detail="No updates provided")

    db.commit()
    return FantasyTeamUpdated(
        team_id=team.team_id,
        team_name=team.team_name,
        player_count=player_count,
        updates=updates,
    )


@router.post("/{team_id}/enroll", response_model=FantasyTeamCreated)
def enroll_team(team_id: str, data: FantasyTeamEnroll, db: Session = Depends(get_db)):
    """Enter an existing team into another contest of the same match"""
    team = get_owned_team(db, team_id, data.user_id)

    contest = db.get(Contest, data.contest_id)
    if not contest:
        raise HTTPException(status_code=404, detail="Contest not found")
    if contest.match_id != team.match_id:
        raise HTTPException(status_code=400, detail="Contest is not for the same match as the team")

    check_contest_open(contest)

    existing = db.query(ContestEnrollment).filter_by(
        contest_id=contest.contest_id, user_team_id=team.team_id
    ).first()
    if existing:
        raise HTTPException(status_code=400, detail="Team is already enrolled in this contest")

    match = db.get(Match, team.match_id)
    if not match or not match.is_open_for_teams:
        raise HTTPException(status_code=400, detail="Cannot join a contest after the match has started")

    enrollment = enroll(db, team, contest)
    db.commit()

    return FantasyTeamCreated(
        team_id=team.team_id,
        team_name=team.team_name,
        match_id=team.match_id,
        contest_id=contest.contest_id,
        player_count=len(team.players),
        enrollment_id=enrollment.enrollment_id,
    )


@router.get("/{team_id}", response_model=FantasyTeamResponse)
def get_team(team_id: str, db: Session = Depends(get_db)):
    team = db.get(UserTeam, team_id)
    if not team:
        raise HTTPException(status_code=404, detail="Team not found")

    return FantasyTeamResponse(
        team_id=team.team_id,
        user_id=team.user_id,
        match_id=team.match_id,
        team_name=team.team_name,
        total_points=team.total_points or "0",
        created_at=team.created_at,
        players=[
            FantasyTeamPlayerResponse(
                player_id=tp.player_id,
                full_name=tp.player.full_name,
                player_type=tp.player.player_type.value,
                is_captain=tp.is_captain,
                is_vice_captain=tp.is_vice_captain,
            )
            for tp in team.players
        ],
        contest_ids=[e.contest_id for e in team.enrollments],
    )
