from typing import Optional, List
from sqlalchemy import String, Integer, ForeignKey, Enum, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime
import enum
from app.database import Base


class ContestType(enum.Enum):
    MEGA = "MEGA"
    HEAD_TO_HEAD = "HEAD_TO_HEAD"
    PRACTICE = "PRACTICE"
    PREMIUM = "PREMIUM"


class ContestStatus(enum.Enum):
    CREATED = "CREATED"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    CANCELED = "CANCELED"


class EnrollmentStatus(enum.Enum):
    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"


class Contest(Base):
    __tablename__ = "gamezy_contests"

    contest_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    match_id: Mapped[str] = mapped_column(ForeignKey("gamezy_matches.match_id"))
    contest_name: Mapped[str] = mapped_column(String(100))

    # Spots
    total_spots: Mapped[int] = mapped_column(Integer)
    filled_spots: Mapped[int] = mapped_column(Integer, default=0)

    # Money, kept as decimal strings
    entry_fee: Mapped[str] = mapped_column(String(20))
    total_prize_pool: Mapped[str] = mapped_column(String(20))

    contest_type: Mapped[ContestType] = mapped_column(Enum(ContestType))
    start_time: Mapped[datetime] = mapped_column(DateTime)
    status: Mapped[ContestStatus] = mapped_column(Enum(ContestStatus), default=ContestStatus.CREATED)

    match = relationship("Match")
    enrollments: Mapped[List["ContestEnrollment"]] = relationship("ContestEnrollment", back_populates="contest")

    @property
    def is_full(self) -> bool:
        return (self.filled_spots or 0) >= self.total_spots

    def __repr__(self):
        return f"<Contest {self.contest_name} {self.filled_spots}/{self.total_spots}>"


class ContestEnrollment(Base):
    __tablename__ = "gamezy_contest_enrollments"

    enrollment_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    contest_id: Mapped[str] = mapped_column(ForeignKey("gamezy_contests.contest_id"))
    user_team_id: Mapped[str] = mapped_column(ForeignKey("gamezy_user_teams.team_id"))
    user_id: Mapped[int] = mapped_column(ForeignKey("gamezy_users.id"))
    enrollment_time: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    rank: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    winnings: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    status: Mapped[EnrollmentStatus] = mapped_column(Enum(EnrollmentStatus), default=EnrollmentStatus.ACTIVE)

    contest: Mapped["Contest"] = relationship("Contest", back_populates="enrollments")
    user_team: Mapped["UserTeam"] = relationship("UserTeam", back_populates="enrollments")
    user = relationship("User")

    __table_args__ = (
        UniqueConstraint("contest_id", "user_team_id", name="unique_enrollment"),
    )

    def __repr__(self):
        return f"<ContestEnrollment contest={self.contest_id} team={self.user_team_id} rank={self.rank}>"
