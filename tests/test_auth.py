"""Authentication endpoint and guard tests."""

from datetime import UTC, datetime, timedelta

from jose import jwt
from sqlalchemy.exc import OperationalError

from todogenie.config import get_settings
from todogenie.models.auth_token import AuthToken
from todogenie.models.user import User
from todogenie.services.auth import create_access_token, decode_access_token


def test_register_user(client):
    """Test user registration."""
    response = client.post(
        "/api/auth/register",
        json={"email": "newuser@example.com", "password": "password123", "name": "New User"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["token"]
    assert set(data["user"]) == {"id", "email", "name", "created_at"}
    assert "password_hash" not in data["user"]
    assert data["user"]["email"] == "newuser@example.com"
    assert data["user"]["name"] == "New User"


def test_register_normalizes_email_and_name(client, db):
    """Emails are stored lowercased and trimmed, names trimmed."""
    response = client.post(
        "/api/auth/register",
        json={"email": "  Mixed.Case@Example.COM ", "password": "password123", "name": "  Pat  "},
    )
    assert response.status_code == 201
    assert response.json()["user"]["email"] == "mixed.case@example.com"

    user = db.query(User).one()
    assert user.email == "mixed.case@example.com"
    assert user.name == "Pat"


def test_register_persists_token_row(client, db):
    """Registration records the issued token."""
    response = client.post(
        "/api/auth/register",
        json={"email": "tokens@example.com", "password": "password123", "name": "Tokens"},
    )
    token = response.json()["token"]

    row = db.query(AuthToken).one()
    assert row.auth_token == token
    assert row.user_id == response.json()["user"]["id"]


def test_register_duplicate_email(client, auth_headers):
    """Test registration with duplicate email fails regardless of case and spacing."""
    response = client.post(
        "/api/auth/register",
        json={"email": "  TEST@Example.com ", "password": "password123", "name": "Duplicate"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error_code"] == "USER_ALREADY_EXISTS"
    assert "timestamp" in body


def test_register_validation_errors(client):
    """Short password, bad email and blank name are all rejected."""
    response = client.post(
        "/api/auth/register",
        json={"email": "not-an-email", "password": "short", "name": "   "},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error_code"] == "VALIDATION_ERROR"
    failed = {tuple(err["loc"])[-1] for err in body["details"]["errors"]}
    assert failed == {"email", "password", "name"}


def test_register_database_failure(client, monkeypatch):
    """Persistence errors surface as a structured 500."""

    def broken_create_user(*args, **kwargs):
        raise OperationalError("INSERT INTO users", {}, Exception("connection lost"))

    monkeypatch.setattr("todogenie.api.auth.create_user", broken_create_user)

    response = client.post(
        "/api/auth/register",
        json={"email": "fail@example.com", "password": "password123", "name": "Fail"},
    )
    assert response.status_code == 500
    body = response.json()
    assert body["error_code"] == "INTERNAL_SERVER_ERROR"
    assert body["message"] == "Internal server error during registration"


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/api/auth/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["token"]
    assert data["user"]["id"] == auth_headers.user_id


def test_login_normalizes_email(client, auth_headers):
    response = client.post(
        "/api/auth/login", json={"email": " Test@EXAMPLE.com", "password": "testpass123"}
    )
    assert response.status_code == 200


def test_login_records_token(client, db, auth_headers):
    """Every login adds a token; earlier ones stay valid."""
    client.post("/api/auth/login", json={"email": auth_headers.email, "password": "testpass123"})

    assert db.query(AuthToken).filter_by(user_id=auth_headers.user_id).count() == 2
    assert client.get("/api/auth/verify", headers=auth_headers).status_code == 200


def test_login_failures_are_indistinguishable(client, auth_headers):
    """Wrong password and unknown email produce the same error."""
    wrong_password = client.post(
        "/api/auth/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    unknown_email = client.post(
        "/api/auth/login", json={"email": "nobody@example.com", "password": "testpass123"}
    )

    assert wrong_password.status_code == unknown_email.status_code == 400
    for response in (wrong_password, unknown_email):
        body = response.json()
        body.pop("timestamp")
        assert body == {
            "success": False,
            "message": "Invalid email or password",
            "error_code": "INVALID_CREDENTIALS",
        }


def test_login_missing_fields(client):
    response = client.post("/api/auth/login", json={"email": "someone@example.com"})
    assert response.status_code == 400
    assert response.json()["error_code"] == "MISSING_REQUIRED_FIELDS"


def test_verify(client, auth_headers):
    """Test verifying a token returns its user."""
    response = client.get("/api/auth/verify", headers=auth_headers)
    assert response.status_code == 200
    user = response.json()["user"]
    assert user["id"] == auth_headers.user_id
    assert user["email"] == auth_headers.email


def test_missing_token(client):
    """Test that endpoints require authentication."""
    response = client.get("/api/auth/verify")
    assert response.status_code == 401
    assert response.json()["error_code"] == "AUTH_TOKEN_MISSING"


def test_invalid_token(client):
    response = client.get("/api/tasks", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 403
    assert response.json()["error_code"] == "AUTH_TOKEN_INVALID"


def test_expired_token(client, auth_headers):
    settings = get_settings()
    expired = jwt.encode(
        {
            "user_id": auth_headers.user_id,
            "email": auth_headers.email,
            "exp": datetime.now(UTC) - timedelta(minutes=1),
        },
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )

    response = client.get("/api/auth/verify", headers={"Authorization": f"Bearer {expired}"})
    assert response.status_code == 403
    assert response.json()["error_code"] == "AUTH_TOKEN_INVALID"


def test_token_for_unknown_user(client):
    token = create_access_token("00000000-0000-0000-0000-000000000000", "ghost@example.com")

    response = client.get("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["error_code"] == "AUTH_USER_NOT_FOUND"


def test_token_claims_and_expiry():
    """Tokens carry user_id and email and expire after seven days."""
    token = create_access_token("user-1", "user@example.com")
    payload = decode_access_token(token)

    assert payload["user_id"] == "user-1"
    assert payload["email"] == "user@example.com"
    assert payload["exp"] - payload["iat"] == 7 * 24 * 60 * 60


def test_get_own_profile(client, auth_headers):
    response = client.get(f"/api/users/{auth_headers.user_id}", headers=auth_headers)
    assert response.status_code == 200
    profile = response.json()
    assert profile["user_id"] == auth_headers.user_id
    assert profile["email"] == auth_headers.email
    assert "password_hash" not in profile


def test_get_other_profile_denied(client, auth_headers, other_auth_headers):
    response = client.get(f"/api/users/{other_auth_headers.user_id}", headers=auth_headers)
    assert response.status_code == 403
    assert response.json()["error_code"] == "ACCESS_DENIED"
