"""Storage interfaces and the in-memory backend used by the API.

Handlers never touch these structures directly: the application factory
receives a :class:`Storage` bundle and routes reach it through
:func:`get_storage`, so another backend can be dropped in without editing
any handler.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol

from flask import current_app

from ascendia.models import Essay, Session, UploadedEssay, User

EXTENSION_KEY = "ascendia.storage"


class CredentialStore(Protocol):
    def get(self, email: str) -> Optional[User]: ...

    def add(self, user: User) -> bool: ...

    def __len__(self) -> int: ...


class EssayStore(Protocol):
    def append(self, essay: Essay) -> None: ...

    def all(self) -> List[Essay]: ...


class UploadStore(Protocol):
    def append(self, upload: UploadedEssay) -> None: ...

    def all(self) -> List[UploadedEssay]: ...


class SessionStore(Protocol):
    def get(self, token: str) -> Optional[Session]: ...

    def put(self, session: Session) -> None: ...

    def delete(self, token: str) -> bool: ...

    def prune(self, now: int) -> int: ...


class InMemoryCredentialStore:
    """Registered users keyed by email."""

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()

    def get(self, email: str) -> Optional[User]:
        return self._users.get(email)

    def add(self, user: User) -> bool:
        """Insert ``user`` unless the email is taken; return whether it was stored."""
        with self._lock:
            if user.email in self._users:
                return False
            self._users[user.email] = user
            return True

    def __len__(self) -> int:
        return len(self._users)


class _AppendOnlyList:
    def __init__(self) -> None:
        self._items: list = []
        self._lock = threading.Lock()

    def append(self, item) -> None:
        with self._lock:
            self._items.append(item)

    def all(self) -> list:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


class InMemoryEssayStore(_AppendOnlyList):
    """Essays in submission order."""


class InMemoryUploadStore(_AppendOnlyList):
    """Uploaded essay metadata in upload order."""


class InMemorySessionStore:
    """Active sessions keyed by their opaque token."""

    def __init__(self) -> None:
        self._sessions: Dict[str, Session] = {}
        self._lock = threading.Lock()

    def get(self, token: str) -> Optional[Session]:
        return self._sessions.get(token)

    def put(self, session: Session) -> None:
        with self._lock:
            self._sessions[session.token] = session

    def delete(self, token: str) -> bool:
        with self._lock:
            return self._sessions.pop(token, None) is not None

    def prune(self, now: int) -> int:
        """Drop every session that expired at or before ``now``."""
        with self._lock:
            expired = [token for token, record in self._sessions.items() if record.is_expired(now)]
            for token in expired:
                del self._sessions[token]
        return len(expired)

    def __len__(self) -> int:
        return len(self._sessions)


@dataclass
class Storage:
    users: CredentialStore
    essays: EssayStore
    uploads: UploadStore
    sessions: SessionStore

    @classmethod
    def in_memory(cls) -> "Storage":
        return cls(
            users=InMemoryCredentialStore(),
            essays=InMemoryEssayStore(),
            uploads=InMemoryUploadStore(),
            sessions=InMemorySessionStore(),
        )


def get_storage() -> Storage:
    """Return the storage bundle attached to the running application."""
    return current_app.extensions[EXTENSION_KEY]
