"""
User account model
"""
from typing import List
from sqlalchemy import String, Integer, DateTime, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime
import enum
from app.database import Base


class UserStatus(enum.Enum):
    ACTIVE = "Active"
    SUSPEND = "Suspend"
    PENDING = "Pending"


class User(Base):
    __tablename__ = "gamezy_users"

    id: Mapped[int] = mapped_column(primary_key=True)
    handle: Mapped[str] = mapped_column(String(50))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    total_balance: Mapped[int] = mapped_column(Integer, default=0)
    status: Mapped[UserStatus] = mapped_column(Enum(UserStatus), default=UserStatus.ACTIVE)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    fantasy_teams: Mapped[List["UserTeam"]] = relationship("UserTeam", back_populates="user")

    def __repr__(self):
        return f"<User '{self.handle}'>"
