"""HTTP client for the TodoGenie API."""

import logging
from typing import Any

import httpx

from todogenie.schemas.auth import AuthResponse, UserProfile, VerifyResponse
from todogenie.schemas.task import TaskResponse

logger = logging.getLogger(__name__)

API_TIMEOUT = 30.0


class TodoApiClient:
    """Thin async wrapper around the REST endpoints."""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float = API_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def request(
        self,
        method: str,
        path: str,
        token: str | None = None,
        **kwargs: Any,
    ) -> Any:
        """Send a request and return the decoded JSON body (None for 204).

        Raises httpx.HTTPStatusError for non-2xx responses.
        """
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        ) as client:
            response = await client.request(method, path, headers=headers, **kwargs)
            logger.debug(f"{method} {path} -> {response.status_code}")
            response.raise_for_status()
            if response.status_code == httpx.codes.NO_CONTENT:
                return None
            return response.json()

    # Auth

    async def login(self, email: str, password: str) -> AuthResponse:
        data = await self.request(
            "POST", "/api/auth/login", json={"email": email, "password": password}
        )
        return AuthResponse.model_validate(data)

    async def register(self, email: str, password: str, name: str) -> AuthResponse:
        data = await self.request(
            "POST",
            "/api/auth/register",
            json={"email": email, "password": password, "name": name},
        )
        return AuthResponse.model_validate(data)

    async def verify(self, token: str) -> VerifyResponse:
        data = await self.request("GET", "/api/auth/verify", token=token)
        return VerifyResponse.model_validate(data)

    async def get_profile(self, token: str, user_id: str) -> UserProfile:
        data = await self.request("GET", f"/api/users/{user_id}", token=token)
        return UserProfile.model_validate(data)

    # Tasks

    async def list_tasks(self, token: str, **filters: Any) -> list[TaskResponse]:
        params = {key: value for key, value in filters.items() if value is not None}
        data = await self.request("GET", "/api/tasks", token=token, params=params)
        return [TaskResponse.model_validate(task) for task in data]

    async def create_task(self, token: str, task_name: str, **fields: Any) -> TaskResponse:
        data = await self.request(
            "POST", "/api/tasks", token=token, json={"task_name": task_name, **fields}
        )
        return TaskResponse.model_validate(data)

    async def get_task(self, token: str, task_id: str) -> TaskResponse:
        data = await self.request("GET", f"/api/tasks/{task_id}", token=token)
        return TaskResponse.model_validate(data)

    async def update_task(self, token: str, task_id: str, **changes: Any) -> TaskResponse:
        data = await self.request("PATCH", f"/api/tasks/{task_id}", token=token, json=changes)
        return TaskResponse.model_validate(data)

    async def delete_task(self, token: str, task_id: str) -> None:
        await self.request("DELETE", f"/api/tasks/{task_id}", token=token)

    async def health(self) -> dict[str, Any]:
        return await self.request("GET", "/api/health")
