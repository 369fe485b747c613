"""
Seed Generator - demo teams, squads, a user, an upcoming match and its contests
"""
import uuid
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from app.models.contest import Contest, ContestType, ContestStatus
from app.models.match import Match, MatchStatus, MatchType
from app.models.player import Player, PlayerType
from app.models.team import Team, Squad, TeamType
from app.models.user import User


DEMO_TEAMS = [
    {"team_id": "MI", "team_name": "Mumbai Indians", "country": "India"},
    {"team_id": "CSK", "team_name": "Chennai Super Kings", "country": "India"},
]

# Per team: 4 batsmen, 1 keeper, 2 all-rounders, 4 bowlers
DEMO_SQUADS = {
    "MI": [
        ("Rohit Sharma", PlayerType.BATSMAN),
        ("Suryakumar Yadav", PlayerType.BATSMAN),
        ("Tilak Varma", PlayerType.BATSMAN),
        ("Naman Dhir", PlayerType.BATSMAN),
        ("Ryan Rickelton", PlayerType.WICKET_KEEPER),
        ("Hardik Pandya", PlayerType.ALL_ROUNDER),
        ("Will Jacks", PlayerType.ALL_ROUNDER),
        ("Jasprit Bumrah", PlayerType.BOWLER),
        ("Trent Boult", PlayerType.BOWLER),
        ("Deepak Chahar", PlayerType.BOWLER),
        ("Karn Sharma", PlayerType.BOWLER),
    ],
    "CSK": [
        ("Ruturaj Gaikwad", PlayerType.BATSMAN),
        ("Devon Conway", PlayerType.BATSMAN),
        ("Rahul Tripathi", PlayerType.BATSMAN),
        ("Shivam Dube", PlayerType.BATSMAN),
        ("MS Dhoni", PlayerType.WICKET_KEEPER),
        ("Ravindra Jadeja", PlayerType.ALL_ROUNDER),
        ("Sam Curran", PlayerType.ALL_ROUNDER),
        ("Noor Ahmad", PlayerType.BOWLER),
        ("Khaleel Ahmed", PlayerType.BOWLER),
        ("Matheesha Pathirana", PlayerType.BOWLER),
        ("Ravichandran Ashwin", PlayerType.BOWLER),
    ],
}

CONTEST_TEMPLATES = {
    ContestType.MEGA: {"name": "Mega Contest", "spots": 10000, "fee": "49", "prize": "400000"},
    ContestType.HEAD_TO_HEAD: {"name": "1v1 Challenge", "spots": 2, "fee": "49", "prize": "90"},
    ContestType.PRACTICE: {"name": "Practice Round", "spots": 500, "fee": "0", "prize": "0"},
    ContestType.PREMIUM: {"name": "Premium Contest", "spots": 100, "fee": "1999", "prize": "180000"},
}


class SeedGenerator:
    @classmethod
    def create_teams(cls) -> list[Team]:
        return [
            Team(team_type=TeamType.IPL, logo_url=None, **data)
            for data in DEMO_TEAMS
        ]

    @classmethod
    def create_squads(cls) -> tuple[list[Player], list[Squad]]:
        players = []
        squads = []
        for team_id, members in DEMO_SQUADS.items():
            for i, (name, player_type) in enumerate(members, start=1):
                player = Player(
                    player_id=f"{team_id}-{i:02d}",
                    full_name=name,
                    country="India",
                    player_type=player_type,
                    base_credit_value=9 if i <= 3 else 8,
                )
                players.append(player)
                squads.append(Squad(player_id=player.player_id, team_id=team_id, is_active=True))
        return players, squads

    @classmethod
    def create_contests(cls, match: Match) -> list[Contest]:
        """One contest per type, opening 15 minutes before the match"""
        start_time = match.match_date - timedelta(minutes=15)
        return [
            Contest(
                contest_id=str(uuid.uuid4()),
                match_id=match.match_id,
                contest_name=t["name"],
                total_spots=t["spots"],
                filled_spots=0,
                entry_fee=t["fee"],
                total_prize_pool=t["prize"],
                contest_type=contest_type,
                start_time=start_time,
                status=ContestStatus.CREATED,
            )
            for contest_type, t in CONTEST_TEMPLATES.items()
        ]

    @classmethod
    def seed(cls, session: Session, match_in_days: int = 1) -> Match:
        """Insert the demo data set and return the demo match"""
        session.add_all(cls.create_teams())
        players, squads = cls.create_squads()
        session.add_all(players)
        session.flush()
        session.add_all(squads)

        session.add(User(handle="demo", email="demo@gamezy.local"))

        match = Match(
            match_id=str(uuid.uuid4()),
            home_team_id="MI",
            away_team_id="CSK",
            match_date=datetime.utcnow() + timedelta(days=match_in_days),
            match_type=MatchType.IPL,
            venue="Wankhede Stadium",
            match_status=MatchStatus.UPCOMING,
        )
        session.add(match)
        session.flush()
        session.add_all(cls.create_contests(match))
        session.commit()
        return match
