"""
Shared fixtures: an in-memory database loaded with the demo data set.
"""
import uuid

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base
from app.models import user, team, player, match, performance, contest, user_team  # noqa
from app.models.user_team import UserTeam, UserTeamPlayer
from app.generators.seed_generator import SeedGenerator


# 6 from MI, 5 from CSK: 4 batsmen, 1 keeper, 2 all-rounders, 4 bowlers
VALID_PICKS = [
    {"player_id": "MI-01", "is_captain": True, "is_vice_captain": False},
    {"player_id": "MI-02", "is_captain": False, "is_vice_captain": False},
    {"player_id": "MI-05", "is_captain": False, "is_vice_captain": False},
    {"player_id": "MI-06", "is_captain": False, "is_vice_captain": False},
    {"player_id": "MI-08", "is_captain": False, "is_vice_captain": False},
    {"player_id": "MI-09", "is_captain": False, "is_vice_captain": False},
    {"player_id": "CSK-01", "is_captain": False, "is_vice_captain": False},
    {"player_id": "CSK-03", "is_captain": False, "is_vice_captain": False},
    {"player_id": "CSK-06", "is_captain": False, "is_vice_captain": True},
    {"player_id": "CSK-08", "is_captain": False, "is_vice_captain": False},
    {"player_id": "CSK-09", "is_captain": False, "is_vice_captain": False},
]


@pytest.fixture
def session_factory():
    """In-memory database shared by every session (and TestClient threads)."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine)
    engine.dispose()


@pytest.fixture
def test_db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def demo_match(test_db):
    """Seeded upcoming MI vs CSK match with one contest per type."""
    return SeedGenerator.seed(test_db)


def make_user_team(session, match, picks, user_id=1, name="Test XI"):
    team = UserTeam(
        team_id=str(uuid.uuid4()),
        user_id=user_id,
        match_id=match.match_id,
        team_name=name,
        total_points="0",
    )
    for pick in picks:
        team.players.append(UserTeamPlayer(**pick))
    session.add(team)
    session.commit()
    return team
