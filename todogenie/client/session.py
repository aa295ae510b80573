"""Client-side authentication session.

The store owns the session state, exposes the login/register/initialize/
logout actions and notifies subscribers after every change. Only the user
and token are persisted; loading flags always start fresh.
"""

import logging
from collections.abc import Callable

import httpx
from pydantic import BaseModel, Field

from todogenie.client.api import TodoApiClient
from todogenie.client.storage import MemoryStorage, PersistedSession, SessionStorage
from todogenie.schemas.auth import UserPublic

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = "Request timeout. Please check your connection and try again."
NETWORK_MESSAGE = "Network error. Please check your connection and try again."


class SessionError(Exception):
    """An auth action failed; the message is suitable for display."""


class AuthenticationStatus(BaseModel):
    is_authenticated: bool = False
    is_loading: bool = False


class AuthenticationState(BaseModel):
    current_user: UserPublic | None = None
    auth_token: str | None = None
    authentication_status: AuthenticationStatus = Field(default_factory=AuthenticationStatus)
    error_message: str | None = None


Listener = Callable[[AuthenticationState], None]


def describe_error(error: Exception, fallback: str) -> str:
    """Turn a failed request into a human-readable message."""
    if isinstance(error, httpx.TimeoutException):
        return TIMEOUT_MESSAGE
    if isinstance(error, httpx.NetworkError):
        return NETWORK_MESSAGE
    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            if data.get("message"):
                return data["message"]
            field_errors = data.get("field_errors") or []
            if field_errors and field_errors[0].get("message"):
                return field_errors[0]["message"]
        return f"Server error: {response.status_code}"
    if isinstance(error, ValueError):
        # undecodable or wrongly shaped success body
        return fallback
    return str(error) or fallback


class SessionStore:
    """Injectable container for the authenticated session."""

    def __init__(self, api: TodoApiClient, storage: SessionStorage | None = None) -> None:
        self.api = api
        self.storage = storage or MemoryStorage()
        self._listeners: list[Listener] = []

        persisted = self.storage.load()
        self._state = AuthenticationState(
            current_user=persisted.current_user,
            auth_token=persisted.auth_token,
            authentication_status=AuthenticationStatus(
                is_authenticated=persisted.auth_token is not None,
                is_loading=True,
            ),
        )

    @property
    def state(self) -> AuthenticationState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, state: AuthenticationState) -> None:
        self._state = state
        self.storage.save(
            PersistedSession(current_user=state.current_user, auth_token=state.auth_token)
        )
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)

    def _start_loading(self) -> None:
        self._set(
            self._state.model_copy(
                update={
                    "authentication_status": self._state.authentication_status.model_copy(
                        update={"is_loading": True}
                    ),
                    "error_message": None,
                }
            )
        )

    def _signed_in(self, user: UserPublic, token: str) -> None:
        self._set(
            AuthenticationState(
                current_user=user,
                auth_token=token,
                authentication_status=AuthenticationStatus(is_authenticated=True),
            )
        )

    def _signed_out(self, error_message: str | None = None) -> None:
        self._set(AuthenticationState(error_message=error_message))

    async def login(self, email: str, password: str) -> None:
        self._start_loading()
        try:
            result = await self.api.login(email, password)
        except (httpx.HTTPError, ValueError) as e:
            message = describe_error(e, "Login failed")
            logger.info(f"Login failed: {message}")
            self._signed_out(message)
            raise SessionError(message) from e
        self._signed_in(result.user, result.token)

    async def register(self, email: str, password: str, name: str) -> None:
        self._start_loading()
        try:
            result = await self.api.register(email, password, name)
        except (httpx.HTTPError, ValueError) as e:
            message = describe_error(e, "Registration failed")
            logger.info(f"Registration failed: {message}")
            self._signed_out(message)
            raise SessionError(message) from e
        self._signed_in(result.user, result.token)

    async def initialize(self) -> None:
        """Confirm a persisted token with the server, or drop it."""
        token = self._state.auth_token
        if not token:
            self._set(
                self._state.model_copy(
                    update={"authentication_status": AuthenticationStatus()}
                )
            )
            return

        try:
            result = await self.api.verify(token)
        except (httpx.HTTPError, ValueError) as e:
            logger.info(f"Stored session rejected: {describe_error(e, 'verify failed')}")
            self._signed_out()
            return
        self._signed_in(result.user, token)

    def logout(self) -> None:
        """Forget the session locally. Issued tokens stay valid server-side."""
        self._state = AuthenticationState()
        self.storage.clear()
        self._notify()

    def clear_error(self) -> None:
        self._set(self._state.model_copy(update={"error_message": None}))
