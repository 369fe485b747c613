from typing import List
from sqlalchemy import String, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime
from app.database import Base
from app.engine.scoring import PlayerRole


class UserTeam(Base):
    """A user's fantasy XI for one match"""
    __tablename__ = "gamezy_user_teams"

    team_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("gamezy_users.id"))
    match_id: Mapped[str] = mapped_column(ForeignKey("gamezy_matches.match_id"))
    team_name: Mapped[str] = mapped_column(String(50))
    total_points: Mapped[str] = mapped_column(String(20), default="0")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    user: Mapped["User"] = relationship("User", back_populates="fantasy_teams")
    match = relationship("Match")
    players: Mapped[List["UserTeamPlayer"]] = relationship(
        "UserTeamPlayer", back_populates="user_team", cascade="all, delete-orphan"
    )
    enrollments: Mapped[List["ContestEnrollment"]] = relationship("ContestEnrollment", back_populates="user_team")

    def __repr__(self):
        return f"<UserTeam {self.team_name} match={self.match_id} pts={self.total_points}>"


class UserTeamPlayer(Base):
    __tablename__ = "gamezy_user_team_players"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_team_id: Mapped[str] = mapped_column(ForeignKey("gamezy_user_teams.team_id"))
    player_id: Mapped[str] = mapped_column(ForeignKey("gamezy_players.player_id"))
    is_captain: Mapped[bool] = mapped_column(default=False)
    is_vice_captain: Mapped[bool] = mapped_column(default=False)

    user_team: Mapped["UserTeam"] = relationship("UserTeam", back_populates="players")
    player = relationship("Player")

    __table_args__ = (
        UniqueConstraint("user_team_id", "player_id", name="unique_user_team_player"),
    )

    @property
    def role(self) -> PlayerRole:
        return PlayerRole.from_flags(self.is_captain, self.is_vice_captain)

    def __repr__(self):
        return f"<UserTeamPlayer team={self.user_team_id} player={self.player_id} role={self.role.value}>"
