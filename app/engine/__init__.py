from app.engine.scoring import ScoringEngine, PlayerMatchStats, PlayerRole, score

__all__ = ["ScoringEngine", "PlayerMatchStats", "PlayerRole", "score"]
