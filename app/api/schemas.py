"""
Pydantic schemas for API request/response models
"""
from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import datetime
from enum import Enum


# Enums
class PlayerTypeEnum(str, Enum):
    BATSMAN = "BATSMAN"
    BOWLER = "BOWLER"
    ALL_ROUNDER = "ALL_ROUNDER"
    WICKET_KEEPER = "WICKET_KEEPER"


class ContestTypeEnum(str, Enum):
    MEGA = "MEGA"
    HEAD_TO_HEAD = "HEAD_TO_HEAD"
    PRACTICE = "PRACTICE"
    PREMIUM = "PREMIUM"


class PlayerRoleEnum(str, Enum):
    NONE = "none"
    CAPTAIN = "captain"
    VICE_CAPTAIN = "vice_captain"


# Team Schemas
class TeamResponse(BaseModel):
    team_id: str
    team_name: str
    country: str
    logo_url: Optional[str] = None

    class Config:
        from_attributes = True


class SquadPlayerResponse(BaseModel):
    player_id: str
    full_name: str
    country: str
    player_type: str
    player_role: Optional[str] = None
    batting_style: Optional[str] = None
    bowling_style: Optional[str] = None
    base_credit_value: int


class SquadResponse(BaseModel):
    team: TeamResponse
    squad: Dict[str, List[SquadPlayerResponse]]
    total_players: int


# Match Schemas
class MatchResponse(BaseModel):
    match_id: str
    home_team: Optional[TeamResponse] = None
    away_team: Optional[TeamResponse] = None
    match_date: datetime
    match_type: str
    venue: Optional[str] = None
    match_status: str


class ScheduleResponse(BaseModel):
    matches: List[MatchResponse]
    count: int


# Contest Schemas
class ContestCreate(BaseModel):
    match_id: str = Field(min_length=1)
    contest_name: str = Field(min_length=3)
    total_spots: int = Field(gt=0)
    entry_fee: str = Field(min_length=1)
    total_prize_pool: str = Field(min_length=1)
    contest_type: ContestTypeEnum
    start_time: datetime


class ContestResponse(BaseModel):
    contest_id: str
    match_id: str
    contest_name: str
    total_spots: int
    filled_spots: int
    entry_fee: str
    total_prize_pool: str
    contest_type: str
    start_time: datetime
    status: str


class MatchContestsResponse(BaseModel):
    match_id: str
    contests_count: int
    contests: Dict[str, List[ContestResponse]]


class EnrollmentResponse(BaseModel):
    enrollment_id: str
    contest_id: str
    user_team_id: str
    user_id: int
    enrollment_time: datetime
    status: str
    rank: Optional[int] = None
    winnings: Optional[str] = None
    team_name: Optional[str] = None
    total_points: Optional[str] = None
    user_handle: Optional[str] = None


class UserContestEntry(BaseModel):
    enrollment: EnrollmentResponse
    contest: ContestResponse
    match: MatchResponse


class UserContestsResponse(BaseModel):
    user_id: int
    total_contests: int
    contests: Dict[str, List[UserContestEntry]]


class ContestEntriesResponse(BaseModel):
    contest: ContestResponse
    enrollments: List[EnrollmentResponse]
    enrollment_count: int


# Fantasy team Schemas
class PlayerPick(BaseModel):
    player_id: str = Field(min_length=1)
    is_captain: bool = False
    is_vice_captain: bool = False


class FantasyTeamCreate(BaseModel):
    user_id: int
    match_id: str = Field(min_length=1)
    contest_id: str = Field(min_length=1)
    team_name: str = Field(min_length=3, max_length=50)
    players: List[PlayerPick]


class FantasyTeamUpdate(BaseModel):
    user_id: int
    team_name: Optional[str] = Field(default=None, min_length=3, max_length=50)
    players: Optional[List[PlayerPick]] = None


class FantasyTeamEnroll(BaseModel):
    user_id: int
    contest_id: str = Field(min_length=1)


class RosterValidateRequest(BaseModel):
    match_id: str = Field(min_length=1)
    players: List[PlayerPick]


class RosterValidationResponse(BaseModel):
    valid: bool
    failure: Optional[str] = None
    message: str
    breakdown: Dict[str, Dict[str, int]]


class FantasyTeamPlayerResponse(BaseModel):
    player_id: str
    full_name: str
    player_type: str
    is_captain: bool
    is_vice_captain: bool


class FantasyTeamResponse(BaseModel):
    team_id: str
    user_id: int
    match_id: str
    team_name: str
    total_points: str
    created_at: datetime
    players: List[FantasyTeamPlayerResponse]
    contest_ids: List[str] = []


class FantasyTeamCreated(BaseModel):
    team_id: str
    team_name: str
    match_id: str
    contest_id: str
    player_count: int
    enrollment_id: str


class FantasyTeamUpdated(BaseModel):
    team_id: str
    team_name: Optional[str] = None
    player_count: Optional[int] = None
    updates: List[str]


# Points Schemas
# No ge=0 here: negative counts are clamped to zero when scored
MAX_STAT_VALUE = 100_000


class PlayerStatsPayload(BaseModel):
    runs: int = Field(0, le=MAX_STAT_VALUE)
    balls_faced: int = Field(0, le=MAX_STAT_VALUE)
    fours: int = Field(0, le=MAX_STAT_VALUE)
    sixes: int = Field(0, le=MAX_STAT_VALUE)
    wickets: int = Field(0, le=MAX_STAT_VALUE)
    maidens: int = Field(0, le=MAX_STAT_VALUE)
    catches: int = Field(0, le=MAX_STAT_VALUE)
    run_outs: int = Field(0, le=MAX_STAT_VALUE)
    stumpings: int = Field(0, le=MAX_STAT_VALUE)
    overs_bowled: str = "0"
    strike_rate: str = "0"
    economy_rate: str = "0"


class ScoreRequest(BaseModel):
    stats: PlayerStatsPayload
    role: PlayerRoleEnum = PlayerRoleEnum.NONE


class ScoreResponse(BaseModel):
    batting: int
    bowling: int
    fielding: int
    base: int
    multiplier: str
    total: str


class ScorecardLinePayload(BaseModel):
    player_id: Optional[str] = None
    name: Optional[str] = None
    stats: PlayerStatsPayload


class ScorecardRequest(BaseModel):
    completed: bool = False
    players: List[ScorecardLinePayload]


class ScorecardResponse(BaseModel):
    match_id: str
    match_status: str
    players_updated: Dict[str, str]
    skipped: List[str]
    team_totals: Dict[str, str]


class PendingMatch(BaseModel):
    match_id: str
    home_team_id: str
    away_team_id: str
    match_status: str
    match_date: datetime
    source_match_id: Optional[str] = None
