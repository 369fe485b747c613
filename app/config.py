"""
Application configuration
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Settings from environment variables"""

    # SQLite file, /app/data/... in Docker
    DATABASE_PATH: str = os.getenv("DATABASE_PATH", "gamezy.db")

    # Extra CORS origins (comma-separated)
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")

    # JSON file mapping internal match ids to scorecard provider ids
    MATCH_SOURCE_MAP_PATH: str = os.getenv("MATCH_SOURCE_MAP_PATH", "")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Team composition
    SQUAD_SIZE: int = 11


settings = Settings()
