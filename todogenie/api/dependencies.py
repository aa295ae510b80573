"""FastAPI dependencies for authentication and database."""

import logging
from typing import Annotated

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from todogenie.database import get_db
from todogenie.errors import ApiError
from todogenie.models.user import User
from todogenie.services.auth import decode_access_token, get_user_by_id

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from a bearer token.

    Reads only the token and the users table; never writes.
    """
    if credentials is None or not credentials.credentials:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "Access token required", "AUTH_TOKEN_MISSING")

    payload = decode_access_token(credentials.credentials)
    user_id = payload.get("user_id") if payload else None
    if user_id is None:
        raise ApiError(status.HTTP_403_FORBIDDEN, "Invalid or expired token", "AUTH_TOKEN_INVALID")

    user = get_user_by_id(db, user_id)
    if user is None:
        logger.warning(f"Token presented for unknown user {user_id}")
        raise ApiError(
            status.HTTP_401_UNAUTHORIZED,
            "Invalid token - user not found",
            "AUTH_USER_NOT_FOUND",
        )

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
DbSession = Annotated[Session, Depends(get_db)]
