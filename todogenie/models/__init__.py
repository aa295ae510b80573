"""SQLAlchemy models."""

from todogenie.models.auth_token import AuthToken
from todogenie.models.search_filter import SearchFilter
from todogenie.models.task import Task
from todogenie.models.user import User

__all__ = [
    "User",
    "Task",
    "AuthToken",
    "SearchFilter",
]
