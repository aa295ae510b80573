"""Persistence for the client session between runs."""

import logging
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, ValidationError

from todogenie.schemas.auth import UserPublic

logger = logging.getLogger(__name__)


class PersistedSession(BaseModel):
    """The only session fields that survive a reload."""

    current_user: UserPublic | None = None
    auth_token: str | None = None


class SessionStorage(Protocol):
    def load(self) -> PersistedSession: ...

    def save(self, session: PersistedSession) -> None: ...

    def clear(self) -> None: ...


class MemoryStorage:
    """Keeps the session for the life of the process."""

    def __init__(self, session: PersistedSession | None = None) -> None:
        self._session = session or PersistedSession()

    def load(self) -> PersistedSession:
        return self._session.model_copy()

    def save(self, session: PersistedSession) -> None:
        self._session = session.model_copy()

    def clear(self) -> None:
        self._session = PersistedSession()


class JsonFileStorage:
    """Stores the session as JSON in a single file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> PersistedSession:
        if not self.path.exists():
            return PersistedSession()
        try:
            return PersistedSession.model_validate_json(self.path.read_text(encoding="utf-8"))
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return PersistedSession()

    def save(self, session: PersistedSession) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(session.model_dump_json(), encoding="utf-8")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
