from typing import Optional, List
from sqlalchemy import String, Integer, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
import enum
from app.database import Base


class PlayerType(enum.Enum):
    BATSMAN = "BATSMAN"
    BOWLER = "BOWLER"
    ALL_ROUNDER = "ALL_ROUNDER"
    WICKET_KEEPER = "WICKET_KEEPER"


class Player(Base):
    __tablename__ = "gamezy_players"

    player_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    full_name: Mapped[str] = mapped_column(String(100), index=True)
    country: Mapped[str] = mapped_column(String(50))
    player_type: Mapped[PlayerType] = mapped_column(Enum(PlayerType))

    # Profile
    date_of_birth: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    batting_style: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    bowling_style: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    player_role: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)  # free text from the provider, e.g. "Opener"

    base_credit_value: Mapped[int] = mapped_column(Integer, default=8)

    squads: Mapped[List["Squad"]] = relationship("Squad", back_populates="player")

    @property
    def last_name(self) -> str:
        parts = self.full_name.split()
        return parts[-1] if parts else ""

    def __repr__(self):
        return f"<Player {self.full_name} ({self.player_type.value})>"
