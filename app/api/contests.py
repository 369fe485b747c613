"""
Contest API endpoints
"""
import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.contest import Contest, ContestEnrollment, ContestType, ContestStatus
from app.models.match import Match, MatchStatus
from app.models.user import User
from app.api.matches import match_to_response, get_match_or_404
from app.api.schemas import (
    ContestCreate, ContestResponse, MatchContestsResponse, EnrollmentResponse,
    UserContestEntry, UserContestsResponse, ContestEntriesResponse
)

router = APIRouter(prefix="/contests", tags=["Contests"])


def contest_to_response(contest: Contest) -> ContestResponse:
    return ContestResponse(
        contest_id=contest.contest_id,
        match_id=contest.match_id,
        contest_name=contest.contest_name,
        total_spots=contest.total_spots,
        filled_spots=contest.filled_spots or 0,
        entry_fee=contest.entry_fee,
        total_prize_pool=contest.total_prize_pool,
        contest_type=contest.contest_type.value,
        start_time=contest.start_time,
        status=contest.status.value,
    )


def enrollment_to_response(enrollment: ContestEnrollment) -> EnrollmentResponse:
    team = enrollment.user_team
    return EnrollmentResponse(
        enrollment_id=enrollment.enrollment_id,
        contest_id=enrollment.contest_id,
        user_team_id=enrollment.user_team_id,
        user_id=enrollment.user_id,
        enrollment_time=enrollment.enrollment_time,
        status=enrollment.status.value,
        rank=enrollment.rank,
        winnings=enrollment.winnings,
        team_name=team.team_name if team else None,
        total_points=team.total_points if team else None,
        user_handle=enrollment.user.handle if enrollment.user else None,
    )


@router.post("", response_model=ContestResponse)
def create_contest(data: ContestCreate, db: Session = Depends(get_db)):
    get_match_or_404(db, data.match_id)

    contest = Contest(
        contest_id=str(uuid.uuid4()),
        match_id=data.match_id,
        contest_name=data.contest_name,
        total_spots=data.total_spots,
        filled_spots=0,
        entry_fee=data.entry_fee,
        total_prize_pool=data.total_prize_pool,
        contest_type=ContestType(data.contest_type.value),
        start_time=data.start_time,
        status=ContestStatus.CREATED,
    )
    db.add(contest)
    db.commit()
    db.refresh(contest)
    return contest_to_response(contest)


@router.get("", response_model=MatchContestsResponse)
def list_match_contests(match_id: str, db: Session = Depends(get_db)):
    """Contests of a match grouped by contest type"""
    get_match_or_404(db, match_id)

    contests = db.query(Contest).filter_by(match_id=match_id).order_by(
        Contest.contest_type, Contest.entry_fee
    ).all()

    grouped = {t.value: [] for t in ContestType}
    for contest in contests:
        grouped[contest.contest_type.value].append(contest_to_response(contest))

    return MatchContestsResponse(
        match_id=match_id,
        contests_count=len(contests),
        contests=grouped,
    )


@router.get("/mine", response_model=UserContestsResponse)
def list_user_contests(user_id: int, db: Session = Depends(get_db)):
    """A user's contest entries grouped by match status"""
    if not db.get(User, user_id):
        raise HTTPException(status_code=404, detail="User not found")

    rows = db.query(ContestEnrollment, Contest, Match).join(
        Contest, ContestEnrollment.contest_id == Contest.contest_id
    ).join(
        Match, Contest.match_id == Match.match_id
    ).filter(
        ContestEnrollment.user_id == user_id
    ).order_by(Contest.start_time.desc()).all()

    grouped = {s.value: [] for s in MatchStatus}
    for enrollment, contest, match in rows:
        grouped[match.match_status.value].append(UserContestEntry(
            enrollment=enrollment_to_response(enrollment),
            contest=contest_to_response(contest),
            match=match_to_response(match),
        ))

    return UserContestsResponse(
        user_id=user_id,
        total_contests=len(rows),
        contests=grouped,
    )


@router.get("/{contest_id}/entries", response_model=ContestEntriesResponse)
def list_contest_entries(contest_id: str, db: Session = Depends(get_db)):
    """Entries ranked once the contest is under way, else in joining order"""
    contest = db.get(Contest, contest_id)
    if not contest:
        raise HTTPException(status_code=404, detail="Contest not found")

    enrollments = list(contest.enrollments)
    if contest.status != ContestStatus.CREATED:
        # Unranked entries go last
        enrollments.sort(key=lambda e: (e.rank is None, e.rank or 0, e.enrollment_time))
    else:
        enrollments.sort(key=lambda e: e.enrollment_time)

    return ContestEntriesResponse(
        contest=contest_to_response(contest),
        enrollments=[enrollment_to_response(e) for e in enrollments],
        enrollment_count=len(enrollments),
    )
