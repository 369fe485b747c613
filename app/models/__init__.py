from app.models.user import User
from app.models.team import Team, Squad
from app.models.player import Player
from app.models.match import Match
from app.models.performance import PlayerPerformance
from app.models.contest import Contest, ContestEnrollment
from app.models.user_team import UserTeam, UserTeamPlayer

__all__ = [
    "User",
    "Team",
    "Squad",
    "Player",
    "Match",
    "PlayerPerformance",
    "Contest",
    "ContestEnrollment",
    "UserTeam",
    "UserTeamPlayer",
]
