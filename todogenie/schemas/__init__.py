"""Pydantic schemas for API requests and responses."""

from todogenie.schemas.auth import (
    AuthResponse,
    LoginRequest,
    UserProfile,
    UserPublic,
    UserRecord,
    UserRegister,
    UserSearch,
    UserUpdate,
    VerifyResponse,
)
from todogenie.schemas.auth_token import (
    AuthTokenCreate,
    AuthTokenRecord,
    AuthTokenSearch,
    AuthTokenUpdate,
)
from todogenie.schemas.search_filter import (
    SearchFilterCreate,
    SearchFilterRecord,
    SearchFilterSearch,
    SearchFilterUpdate,
)
from todogenie.schemas.task import TaskCreate, TaskResponse, TaskSearch, TaskUpdate

__all__ = [
    "UserRecord",
    "UserRegister",
    "UserUpdate",
    "UserSearch",
    "LoginRequest",
    "UserPublic",
    "UserProfile",
    "AuthResponse",
    "VerifyResponse",
    "TaskResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskSearch",
    "AuthTokenRecord",
    "AuthTokenCreate",
    "AuthTokenUpdate",
    "AuthTokenSearch",
    "SearchFilterRecord",
    "SearchFilterCreate",
    "SearchFilterUpdate",
    "SearchFilterSearch",
]
