"""
Database session and connectivity helpers

Builds the SQLAlchemy engine from settings and provides the FastAPI
dependency (``get_db``) used by the routers. One session per request,
always closed in ``finally``.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from loguru import logger

from clubhouse.config import get_settings
from .tables import Base


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across FastAPI's worker threads
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


_settings = get_settings()

engine = create_engine(
    _settings.DATABASE_URL,
    echo=_settings.DATABASE_ECHO,
    connect_args=_connect_args(_settings.DATABASE_URL),
)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db():
    """FastAPI dependency that yields a request-scoped session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Create all tables (no migrations)"""
    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info(f"Database tables ready: {target.url}")
