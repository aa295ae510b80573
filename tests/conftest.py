"""Pytest configuration and fixtures."""

import os

# Settings are read once at import time, so point them at the test database first.
os.environ["DATABASE_URL"] = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from todogenie import models  # noqa: E402, F401
from todogenie.database import Base, SessionLocal, engine, get_db  # noqa: E402
from todogenie.main import app  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user's id and email."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = SessionLocal()

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


@pytest.fixture
def register(client):
    """Factory that registers a user and returns auth headers for them."""

    def _register(email: str, password: str = "testpass123", name: str = "Test User"):
        response = client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "name": name},
        )
        assert response.status_code == 201
        data = response.json()
        return AuthHeaders(
            {"Authorization": f"Bearer {data['token']}"},
            user_id=data["user"]["id"],
            email=data["user"]["email"],
        )

    return _register


@pytest.fixture
def auth_headers(register):
    """Create a user and return auth headers with user info."""
    return register("test@example.com")


@pytest.fixture
def other_auth_headers(register):
    """A second, unrelated user."""
    return register("other@example.com", name="Other User")


@pytest.fixture
def create_task(client):
    """Factory that creates a task through the API and returns its JSON."""

    def _create(headers, task_name: str = "Test Task", **fields):
        response = client.post(
            "/api/tasks", headers=headers, json={"task_name": task_name, **fields}
        )
        assert response.status_code == 201
        return response.json()

    return _create
