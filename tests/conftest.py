"""Pytest configuration and fixtures."""

import os

# Cheap hashes for tests; must be set before settings are first read
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from markers_api import models  # noqa: F401
from markers_api.database import Base, get_db
from markers_api.main import app

DEFAULT_PASSWORD = "password123"


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id, email and token."""

    def __init__(
        self,
        *args,
        user_id: int | None = None,
        email: str | None = None,
        token: str | None = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email
        self.token = token


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").rsplit("/", 1)[0] + "/markers_test"
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_user(client, email: str, name: str = "Test User") -> AuthHeaders:
    """Register a user through the API and return auth headers for them."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "name": name,
            "email": email,
            "password": DEFAULT_PASSWORD,
            "confirm_password": DEFAULT_PASSWORD,
        },
    )
    assert response.status_code == 201
    data = response.json()
    token = data["token"]

    return AuthHeaders(
        {"Authorization": f"Bearer {token}"},
        user_id=data["user"]["id"],
        email=email,
        token=token,
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register_user(client, "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """Create a second user who owns nothing the first user creates."""
    return register_user(client, "other@example.com", name="Other User")


@pytest.fixture
def marker(client, auth_headers):
    """Create a marker owned by the ``auth_headers`` user."""
    response = client.post(
        "/api/v1/markers",
        headers=auth_headers,
        json={
            "title": "Golden Gate",
            "description": "Historic gate",
            "latitude": 50.4501,
            "longitude": 30.5234,
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def make_user(client):
    """Factory fixture registering extra users on demand."""

    def _make_user(email: str, name: str = "Test User") -> AuthHeaders:
        return register_user(client, email, name=name)

    return _make_user
