"""Auth token schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from todogenie.schemas.common import Limit, Offset
from todogenie.schemas.enums import SortOrder


class AuthTokenRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    token_id: str
    user_id: str
    auth_token: str
    created_at: datetime


class AuthTokenCreate(BaseModel):
    user_id: str
    auth_token: str = Field(..., min_length=1)


class AuthTokenUpdate(BaseModel):
    token_id: str
    auth_token: str | None = Field(None, min_length=1)


class AuthTokenSearch(BaseModel):
    user_id: str | None = None
    limit: Limit = 10
    offset: Offset = 0
    sort_by: str = Field("created_at", pattern="^created_at$")
    sort_order: SortOrder = SortOrder.DESC
