"""User and authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from todogenie.schemas.common import DisplayName, Limit, Offset, UtcDatetime, normalize_email
from todogenie.schemas.enums import SortOrder, UserSortField


class UserRecord(BaseModel):
    """Full user row, including the stored credential."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    email: EmailStr
    password_hash: str
    name: str
    created_at: datetime


class UserRegister(BaseModel):
    """User registration request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=255)
    name: DisplayName

    @field_validator("email", mode="before")
    @classmethod
    def normalize(cls, value: object) -> object:
        return normalize_email(value)


class UserUpdate(BaseModel):
    """Partial user update. No route accepts this yet."""

    user_id: str
    email: EmailStr | None = None
    password: str | None = Field(None, min_length=8, max_length=255)
    name: DisplayName | None = None

    @field_validator("email", mode="before")
    @classmethod
    def normalize(cls, value: object) -> object:
        return normalize_email(value)


class UserSearch(BaseModel):
    query: str | None = None
    limit: Limit = 10
    offset: Offset = 0
    sort_by: UserSortField = UserSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC


class LoginRequest(BaseModel):
    """Login request.

    Fields are only checked for presence by the handler, so a malformed
    email yields INVALID_CREDENTIALS rather than a validation error.
    """

    email: str | None = None
    password: str | None = None


class UserPublic(BaseModel):
    """User fields safe to hand back to clients."""

    id: str
    email: str
    name: str
    created_at: UtcDatetime

    @classmethod
    def from_user(cls, user) -> "UserPublic":
        return cls(id=user.user_id, email=user.email, name=user.name, created_at=user.created_at)


class UserProfile(BaseModel):
    """Profile returned by GET /api/users/{user_id}."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    email: str
    name: str
    created_at: UtcDatetime


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    user: UserPublic
    token: str


class VerifyResponse(BaseModel):
    user: UserPublic
