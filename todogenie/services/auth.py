"""Authentication service for JWT issuance and credential checks."""

import logging
import uuid
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from sqlalchemy.orm import Session

from todogenie.config import get_settings
from todogenie.models.auth_token import AuthToken
from todogenie.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()


def normalize_email(email: str) -> str:
    """Lowercased, trimmed form used for storage and uniqueness."""
    return email.strip().lower()


def create_access_token(user_id: str, email: str) -> str:
    """Create a JWT access token."""
    now = datetime.now(UTC)
    to_encode = {
        "user_id": user_id,
        "email": email,
        # Keeps tokens minted in the same second distinct.
        "jti": str(uuid.uuid4()),
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expiration_minutes),
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token. Expired tokens decode to None."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError as e:
        logger.debug(f"Token verification failed: {e}")
        return None


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by normalized email."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_user_by_id(db: Session, user_id: str) -> User | None:
    return db.query(User).filter(User.user_id == user_id).first()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password.

    Unknown email and wrong password both return None so callers cannot
    tell them apart.
    """
    user = get_user_by_email(db, email)
    if not user:
        return None
    # Credentials are stored verbatim, so this is a plain comparison.
    if password != user.password_hash:
        return None
    return user


def create_user(db: Session, email: str, password: str, name: str) -> User:
    """Create a new user."""
    user = User(
        email=normalize_email(email),
        password_hash=password,
        name=name.strip(),
        created_at=datetime.now(UTC),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def issue_token(db: Session, user: User) -> str:
    """Sign a new token for the user and record it."""
    auth_token = create_access_token(user.user_id, user.email)
    db.add(AuthToken(user_id=user.user_id, auth_token=auth_token, created_at=datetime.now(UTC)))
    db.commit()
    return auth_token
