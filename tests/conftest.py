"""
Pytest configuration and fixtures for Clubhouse tests
"""
import os

# Settings are cached on first import; pin them before clubhouse loads
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["HOME_TEAM_ID"] = "1"
os.environ.pop("ADMIN_EMAIL", None)
os.environ.pop("ADMIN_PASSWORD", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from clubhouse.auth.models import Identity, Role
from clubhouse.auth.security import generate_jwt_token
from clubhouse.database import get_db, init_db
from clubhouse.server import app


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(engine):
    """TestClient bound to the in-memory database"""
    TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _headers(role: Role) -> dict:
    token = generate_jwt_token(f"{role.value.lower()}@example.com", role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    return _headers(Role.ADMIN)


@pytest.fixture
def coach_headers():
    return _headers(Role.COACH)


@pytest.fixture
def player_headers():
    return _headers(Role.PLAYER)


@pytest.fixture
def user_headers():
    return _headers(Role.USER)


@pytest.fixture
def admin():
    return Identity(email="admin@example.com", role=Role.ADMIN)


@pytest.fixture
def coach():
    return Identity(email="coach@example.com", role=Role.COACH)


@pytest.fixture
def player_identity():
    return Identity(email="player@example.com", role=Role.PLAYER)


@pytest.fixture
def anonymous():
    return Identity()


@pytest.fixture
def sample_player_payload():
    return {
        "name": "Erling Haaland",
        "number": 9,
        "position": "Striker",
        "birthdate": "2000-07-21",
        "imageUrl": "https://example.com/haaland.png",
    }


@pytest.fixture
def sample_match_payload():
    return {
        "location": "Etihad Stadium",
        "date": "2024-05-19T16:00:00",
        "homeTeamName": "Manchester Shitty",
        "awayTeamName": "West Ham",
    }
