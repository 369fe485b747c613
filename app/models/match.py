from typing import Optional
from sqlalchemy import String, ForeignKey, Enum, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime
import enum
from app.database import Base


class MatchStatus(enum.Enum):
    UPCOMING = "UPCOMING"
    LIVE = "LIVE"
    COMPLETED = "COMPLETED"
    CANCELED = "CANCELED"


class MatchType(enum.Enum):
    T20 = "T20"
    ODI = "ODI"
    TEST = "TEST"
    IPL = "IPL"


class Match(Base):
    __tablename__ = "gamezy_matches"

    match_id: Mapped[str] = mapped_column(String(36), primary_key=True)

    # Teams
    home_team_id: Mapped[str] = mapped_column(ForeignKey("gamezy_teams.team_id"))
    away_team_id: Mapped[str] = mapped_column(ForeignKey("gamezy_teams.team_id"))
    home_team: Mapped["Team"] = relationship("Team", foreign_keys=[home_team_id])
    away_team: Mapped["Team"] = relationship("Team", foreign_keys=[away_team_id])

    # Match info
    match_date: Mapped[datetime] = mapped_column(DateTime)
    match_type: Mapped[MatchType] = mapped_column(Enum(MatchType))
    venue: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Status
    match_status: Mapped[MatchStatus] = mapped_column(Enum(MatchStatus), default=MatchStatus.UPCOMING)

    # Result
    toss_winner_team_id: Mapped[Optional[str]] = mapped_column(ForeignKey("gamezy_teams.team_id"), nullable=True)
    winning_team_id: Mapped[Optional[str]] = mapped_column(ForeignKey("gamezy_teams.team_id"), nullable=True)

    @property
    def is_open_for_teams(self) -> bool:
        """Fantasy teams can only be created or changed before the match starts"""
        return self.match_status == MatchStatus.UPCOMING

    def __repr__(self):
        return f"<Match {self.home_team_id} vs {self.away_team_id} ({self.match_status.value})>"
