"""Authentication API endpoints."""

import logging

from fastapi import APIRouter, status

from todogenie.api.dependencies import CurrentUser, DbSession
from todogenie.errors import ApiError, persistence_guard
from todogenie.schemas.auth import (
    AuthResponse,
    LoginRequest,
    UserPublic,
    UserRegister,
    VerifyResponse,
)
from todogenie.services.auth import authenticate_user, create_user, get_user_by_email, issue_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserRegister, db: DbSession):
    """Register a new user and log them straight in."""
    with persistence_guard(db, "during registration"):
        if get_user_by_email(db, user_data.email):
            logger.info("Registration rejected: email already registered")
            raise ApiError(
                status.HTTP_400_BAD_REQUEST,
                "User with this email already exists",
                "USER_ALREADY_EXISTS",
            )

        user = create_user(db, user_data.email, user_data.password, user_data.name)
        token = issue_token(db, user)

    logger.info(f"Registered user {user.user_id}")
    return AuthResponse(user=UserPublic.from_user(user), token=token)


@router.post("/login", response_model=AuthResponse)
def login(credentials: LoginRequest, db: DbSession):
    """Login with email and password."""
    if not credentials.email or not credentials.password:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            "Email and password are required",
            "MISSING_REQUIRED_FIELDS",
        )

    with persistence_guard(db, "during login"):
        user = authenticate_user(db, credentials.email, credentials.password)
        if not user:
            raise ApiError(
                status.HTTP_400_BAD_REQUEST, "Invalid email or password", "INVALID_CREDENTIALS"
            )
        token = issue_token(db, user)

    logger.info(f"User {user.user_id} logged in")
    return AuthResponse(user=UserPublic.from_user(user), token=token)


@router.get("/verify", response_model=VerifyResponse)
def verify(current_user: CurrentUser):
    """Confirm the presented token and return its user."""
    return VerifyResponse(user=UserPublic.from_user(current_user))
