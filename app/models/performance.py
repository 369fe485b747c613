from sqlalchemy import String, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.database import Base
from app.engine.scoring import PlayerMatchStats


class PlayerPerformance(Base):
    """One player's scorecard line for one match. Overwritten on every refresh."""
    __tablename__ = "gamezy_player_performances"

    performance_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    match_id: Mapped[str] = mapped_column(ForeignKey("gamezy_matches.match_id"))
    player_id: Mapped[str] = mapped_column(ForeignKey("gamezy_players.player_id"))

    # Batting
    runs_scored: Mapped[int] = mapped_column(Integer, default=0)
    balls_faced: Mapped[int] = mapped_column(Integer, default=0)
    fours: Mapped[int] = mapped_column(Integer, default=0)
    sixes: Mapped[int] = mapped_column(Integer, default=0)
    strike_rate: Mapped[str] = mapped_column(String(10), default="0")

    # Bowling
    wickets_taken: Mapped[int] = mapped_column(Integer, default=0)
    maidens: Mapped[int] = mapped_column(Integer, default=0)
    overs_bowled: Mapped[str] = mapped_column(String(10), default="0")
    economy_rate: Mapped[str] = mapped_column(String(10), default="0")

    # Fielding
    catches: Mapped[int] = mapped_column(Integer, default=0)
    run_outs: Mapped[int] = mapped_column(Integer, default=0)
    stumpings: Mapped[int] = mapped_column(Integer, default=0)

    # Base points without captain/vice-captain multiplier, as an exact decimal string
    total_fantasy_points: Mapped[str] = mapped_column(String(20), default="0")

    player = relationship("Player")

    __table_args__ = (
        UniqueConstraint("match_id", "player_id", name="unique_match_player_performance"),
    )

    def to_stats(self) -> PlayerMatchStats:
        return PlayerMatchStats(
            runs=self.runs_scored or 0,
            balls_faced=self.balls_faced or 0,
            fours=self.fours or 0,
            sixes=self.sixes or 0,
            wickets=self.wickets_taken or 0,
            maidens=self.maidens or 0,
            catches=self.catches or 0,
            run_outs=self.run_outs or 0,
            stumpings=self.stumpings or 0,
            overs_bowled=self.overs_bowled or "0",
            strike_rate=self.strike_rate or "0",
            economy_rate=self.economy_rate or "0",
        )

    def apply_stats(self, stats: PlayerMatchStats):
        self.runs_scored = stats.runs
        self.balls_faced = stats.balls_faced
        self.fours = stats.fours
        self.sixes = stats.sixes
        self.strike_rate = stats.strike_rate
        self.wickets_taken = stats.wickets
        self.maidens = stats.maidens
        self.overs_bowled = stats.overs_bowled
        self.economy_rate = stats.economy_rate
        self.catches = stats.catches
        self.run_outs = stats.run_outs
        self.stumpings = stats.stumpings

    def __repr__(self):
        return f"<PlayerPerformance match={self.match_id} player={self.player_id} pts={self.total_fantasy_points}>"
