from typing import Optional, List
from sqlalchemy import String, ForeignKey, Enum, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime
import enum
from app.database import Base


class TeamType(enum.Enum):
    NATIONAL = "NATIONAL"
    IPL = "IPL"
    T20_LEAGUE = "T20_LEAGUE"


class Team(Base):
    """A real cricket team that players are drawn from."""
    __tablename__ = "gamezy_teams"

    team_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    team_name: Mapped[str] = mapped_column(String(100))
    country: Mapped[str] = mapped_column(String(50))
    logo_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    team_type: Mapped[TeamType] = mapped_column(Enum(TeamType))

    squad: Mapped[List["Squad"]] = relationship("Squad", back_populates="team")

    @property
    def active_players(self) -> list:
        return [s.player for s in self.squad if s.is_active]

    def __repr__(self):
        return f"<Team {self.team_name} ({self.team_id})>"


class Squad(Base):
    __tablename__ = "gamezy_squad"

    id: Mapped[int] = mapped_column(primary_key=True)
    player_id: Mapped[str] = mapped_column(ForeignKey("gamezy_players.player_id"))
    team_id: Mapped[str] = mapped_column(ForeignKey("gamezy_teams.team_id"))
    is_active: Mapped[bool] = mapped_column(default=True)
    joined_date: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    team: Mapped["Team"] = relationship("Team", back_populates="squad")
    player: Mapped["Player"] = relationship("Player", back_populates="squads")

    def __repr__(self):
        return f"<Squad team={self.team_id} player={self.player_id} active={self.is_active}>"
