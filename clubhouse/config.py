"""
Clubhouse Config - application settings
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings read from the environment or .env"""

    # App
    APP_NAME: str = "Clubhouse"
    CLUB_NAME: str = "Manchester Shitty"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: List[str] = ["http://localhost:8080", "http://127.0.0.1:8080"]

    # Database
    DATABASE_URL: str = Field(default="sqlite:///./club.db", description="SQLAlchemy URL")
    DATABASE_ECHO: bool = False

    # JWT
    JWT_SECRET_KEY: str = "your-secret-key-change-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_HOURS: int = 8

    # Passwords
    BCRYPT_ROUNDS: int = 12

    # Coaches are attached to the home team unless told otherwise
    HOME_TEAM_ID: Optional[int] = 1

    # Bootstrap admin (created at startup when both are set)
    ADMIN_EMAIL: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
