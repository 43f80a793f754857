"""
Database - SQLAlchemy engine, sessions and ORM tables
"""
from .session import SessionLocal, engine, get_db, init_db
from .tables import (
    Base,
    CoachTable,
    MatchTable,
    PlayerTable,
    StatsTable,
    TeamTable,
    UserTable,
)

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "get_db",
    "init_db",
    "CoachTable",
    "MatchTable",
    "PlayerTable",
    "StatsTable",
    "TeamTable",
    "UserTable",
]
