"""Client-side session store and API client."""

from todogenie.client.api import TodoApiClient
from todogenie.client.session import (
    AuthenticationState,
    AuthenticationStatus,
    SessionError,
    SessionStore,
)
from todogenie.client.storage import JsonFileStorage, MemoryStorage, PersistedSession

__all__ = [
    "TodoApiClient",
    "SessionStore",
    "SessionError",
    "AuthenticationState",
    "AuthenticationStatus",
    "JsonFileStorage",
    "MemoryStorage",
    "PersistedSession",
]
