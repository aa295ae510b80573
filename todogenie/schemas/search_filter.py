"""Saved search filter schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from todogenie.schemas.common import Limit, Offset
from todogenie.schemas.enums import SortOrder


class SearchFilterRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    filter_id: str
    user_id: str
    search_query: str | None
    filter_status: str | None = "incomplete"
    created_at: datetime


class SearchFilterCreate(BaseModel):
    user_id: str
    search_query: str | None = None
    filter_status: str = "incomplete"


class SearchFilterUpdate(BaseModel):
    filter_id: str
    search_query: str | None = None
    filter_status: str | None = None


class SearchFilterSearch(BaseModel):
    user_id: str | None = None
    search_query: str | None = None
    filter_status: str | None = None
    limit: Limit = 10
    offset: Offset = 0
    sort_by: str = Field("created_at", pattern="^created_at$")
    sort_order: SortOrder = SortOrder.DESC
