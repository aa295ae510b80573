"""Task API endpoints."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, status

from todogenie.api.dependencies import CurrentUser, DbSession
from todogenie.errors import ApiError, persistence_guard, validate_payload
from todogenie.schemas.enums import FilterStatus
from todogenie.schemas.task import TaskCreate, TaskResponse, TaskSearch, TaskUpdate
from todogenie.services import tasks as task_service
from todogenie.services.tasks import TaskQuery, get_owned_task

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def completion_filter(filter_status: str | None, is_complete: str | None) -> str | bool | None:
    """Map filter_status onto is_complete; it wins when both are given."""
    if filter_status in (FilterStatus.COMPLETE.value, FilterStatus.INCOMPLETE.value):
        return FilterStatus(filter_status).as_bool()
    return is_complete


@router.get("", response_model=list[TaskResponse])
def list_tasks(
    current_user: CurrentUser,
    db: DbSession,
    user_id: str | None = None,
    search_query: str | None = None,
    query: str | None = None,
    filter_status: str | None = None,
    is_complete: str | None = None,
    limit: str | None = None,
    offset: str | None = None,
    sort_by: str | None = None,
    sort_order: str | None = None,
):
    """List the caller's tasks with optional search, filter, sort and paging."""
    raw = {
        "user_id": user_id,
        "query": search_query or query,
        "is_complete": completion_filter(filter_status, is_complete),
        "limit": limit,
        "offset": offset,
        "sort_by": sort_by,
        "sort_order": sort_order,
    }
    search = validate_payload(
        TaskSearch,
        {key: value for key, value in raw.items() if value is not None},
        "Invalid query parameters",
    )

    if search.user_id and search.user_id != current_user.user_id:
        logger.warning(f"User {current_user.user_id} denied task list of {search.user_id}")
        raise ApiError(
            status.HTTP_403_FORBIDDEN,
            "Access denied - can only view own tasks",
            "ACCESS_DENIED",
        )

    with persistence_guard(db, "retrieving tasks"):
        return TaskQuery.from_search(db, current_user.user_id, search).all()


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    current_user: CurrentUser,
    db: DbSession,
    payload: Annotated[Any, Body()] = None,
):
    """Create a task owned by the caller, whatever user_id the body names."""
    task_data = validate_payload(TaskCreate, payload, user_id=current_user.user_id)

    with persistence_guard(db, "creating task"):
        return task_service.create_task(db, task_data)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: str, current_user: CurrentUser, db: DbSession):
    """Get a single task."""
    with persistence_guard(db, "retrieving task"):
        return get_owned_task(db, task_id, current_user, "view")


@router.patch("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    current_user: CurrentUser,
    db: DbSession,
    payload: Annotated[Any, Body()] = None,
):
    """Partially update a task.

    Ownership is checked before the body is validated.
    """
    with persistence_guard(db, "updating task"):
        task = get_owned_task(db, task_id, current_user, "update")
        update = validate_payload(TaskUpdate, payload, task_id=task_id)
        return task_service.apply_update(db, task, update)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, current_user: CurrentUser, db: DbSession):
    """Delete a task."""
    with persistence_guard(db, "deleting task"):
        task = get_owned_task(db, task_id, current_user, "delete")
        task_service.delete_task(db, task)
