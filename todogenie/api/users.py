"""User profile endpoints."""

import logging

from fastapi import APIRouter, status

from todogenie.api.dependencies import CurrentUser, DbSession
from todogenie.errors import ApiError, persistence_guard
from todogenie.schemas.auth import UserProfile
from todogenie.services.auth import get_user_by_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/{user_id}", response_model=UserProfile)
def get_profile(user_id: str, current_user: CurrentUser, db: DbSession):
    """Get a user's profile. Callers may only read their own."""
    if user_id != current_user.user_id:
        logger.warning(f"User {current_user.user_id} denied profile of {user_id}")
        raise ApiError(
            status.HTTP_403_FORBIDDEN,
            "Access denied - can only view own profile",
            "ACCESS_DENIED",
        )

    with persistence_guard(db, "retrieving user profile"):
        user = get_user_by_id(db, user_id)

    if user is None:
        raise ApiError(status.HTTP_404_NOT_FOUND, "User not found", "USER_NOT_FOUND")
    return user
