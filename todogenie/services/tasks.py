"""Task lookup, filtering and mutation."""

import logging
from typing import Any

from fastapi import status
from sqlalchemy import asc, desc
from sqlalchemy.orm import Query, Session

from todogenie.errors import ApiError
from todogenie.models.task import Task
from todogenie.models.user import User
from todogenie.schemas.enums import SortOrder, TaskSortField
from todogenie.schemas.task import TaskCreate, TaskSearch, TaskUpdate

logger = logging.getLogger(__name__)

# Sorting never interpolates client input; it is looked up here.
SORT_COLUMNS = {
    TaskSortField.TASK_NAME: Task.task_name,
    TaskSortField.DUE_DATE: Task.due_date,
    TaskSortField.CREATED_AT: Task.created_at,
}
SORT_DIRECTIONS = {SortOrder.ASC: asc, SortOrder.DESC: desc}


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class TaskQuery:
    """Builds an owner-scoped task listing from a validated search.

    Every query starts from the owner predicate; optional filters are
    appended as bound expressions.
    """

    def __init__(self, db: Session, owner_id: str) -> None:
        self.query: Query = db.query(Task).filter(Task.user_id == owner_id)

    def matching(self, term: str | None) -> "TaskQuery":
        if term:
            pattern = f"%{escape_like(term)}%"
            self.query = self.query.filter(Task.task_name.ilike(pattern, escape="\\"))
        return self

    def completed(self, is_complete: bool | None) -> "TaskQuery":
        if is_complete is not None:
            self.query = self.query.filter(Task.is_complete.is_(is_complete))
        return self

    def ordered(self, sort_by: TaskSortField, sort_order: SortOrder) -> "TaskQuery":
        direction = SORT_DIRECTIONS[sort_order]
        self.query = self.query.order_by(
            direction(SORT_COLUMNS[sort_by]), direction(Task.task_id)
        )
        return self

    def page(self, limit: int, offset: int) -> "TaskQuery":
        self.query = self.query.limit(limit).offset(offset)
        return self

    def all(self) -> list[Task]:
        return self.query.all()

    @classmethod
    def from_search(cls, db: Session, owner_id: str, search: TaskSearch) -> "TaskQuery":
        return (
            cls(db, owner_id)
            .matching(search.query)
            .completed(search.is_complete)
            .ordered(search.sort_by, search.sort_order)
            .page(search.limit, search.offset)
        )


def get_owned_task(db: Session, task_id: str, user: User, action: str = "access") -> Task:
    """Get a task, enforcing that the caller owns it."""
    task = db.query(Task).filter(Task.task_id == task_id).first()
    if not task:
        raise ApiError(status.HTTP_404_NOT_FOUND, "Task not found", "TASK_NOT_FOUND")

    if task.user_id != user.user_id:
        logger.warning(f"User {user.user_id} denied {action} on task {task_id}")
        raise ApiError(
            status.HTTP_403_FORBIDDEN,
            f"Access denied - can only {action} own tasks",
            "ACCESS_DENIED",
        )
    return task


def create_task(db: Session, data: TaskCreate) -> Task:
    task = Task(
        user_id=data.user_id,
        task_name=data.task_name,
        due_date=data.due_date,
        is_complete=data.is_complete,
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def apply_update(db: Session, task: Task, data: TaskUpdate) -> Task:
    """Apply only the fields present in the update.

    Ownership is immutable after creation, so the earlier ownership check
    still holds when this runs.
    """
    changes: dict[str, Any] = data.changes()
    if not changes:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST, "No valid fields to update", "NO_UPDATE_FIELDS"
        )

    for field, value in changes.items():
        setattr(task, field, value)

    db.commit()
    db.refresh(task)
    return task


def delete_task(db: Session, task: Task) -> None:
    db.delete(task)
    db.commit()
