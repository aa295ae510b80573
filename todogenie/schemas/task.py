"""Task schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from todogenie.schemas.common import Limit, Offset, TaskName, UtcDatetime
from todogenie.schemas.enums import SortOrder, TaskSortField


class TaskResponse(BaseModel):
    """Task as returned by every task endpoint."""

    model_config = ConfigDict(from_attributes=True)

    task_id: str
    user_id: str
    task_name: str
    due_date: UtcDatetime | None
    is_complete: bool


class TaskCreate(BaseModel):
    """Create a new task. user_id is always the authenticated caller."""

    user_id: str
    task_name: TaskName
    due_date: UtcDatetime | None = None
    is_complete: bool = False


class TaskUpdate(BaseModel):
    """Partial task update.

    Only fields present in the payload are applied; use
    ``model_fields_set`` to tell an omitted due_date from an explicit null.
    """

    task_id: str
    task_name: TaskName | None = None
    due_date: UtcDatetime | None = None
    is_complete: bool | None = None

    @field_validator("task_name", "is_complete")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may not be null")
        return value

    def changes(self) -> dict[str, Any]:
        """Fields explicitly supplied, excluding the task id."""
        return {
            field: getattr(self, field)
            for field in ("task_name", "due_date", "is_complete")
            if field in self.model_fields_set
        }


class TaskSearch(BaseModel):
    """Query parameters for listing tasks."""

    user_id: str | None = None
    query: str | None = None
    is_complete: bool | None = None
    limit: Limit = 10
    offset: Offset = 0
    sort_by: TaskSortField = TaskSortField.DUE_DATE
    sort_order: SortOrder = SortOrder.DESC
