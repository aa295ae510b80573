"""Enums for query options and filters."""

from enum import Enum


class TaskSortField(str, Enum):
    """Columns a task listing may be ordered by."""

    TASK_NAME = "task_name"
    DUE_DATE = "due_date"
    CREATED_AT = "created_at"


class UserSortField(str, Enum):
    NAME = "name"
    CREATED_AT = "created_at"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class FilterStatus(str, Enum):
    """Completion filter accepted by the task listing."""

    COMPLETE = "complete"
    INCOMPLETE = "incomplete"

    def as_bool(self) -> bool:
        return self == FilterStatus.COMPLETE
