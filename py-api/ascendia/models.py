"""Record types shared by the stores, services and routes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def isoformat(value: datetime) -> str:
    """Serialize a datetime the way browsers print ``Date.toJSON``."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class User:
    email: str
    password_hash: str
    user_id: str


@dataclass(frozen=True)
class Essay:
    user_id: str
    essay_text: str
    submitted_at: datetime

    def to_json(self) -> Dict[str, Any]:
        return {
            "userId": self.user_id,
            "essayText": self.essay_text,
            "submittedAt": isoformat(self.submitted_at),
        }


@dataclass(frozen=True)
class UploadedEssay:
    """Metadata for an essay submitted as a file.

    ``email`` is whatever the client put in the form; it is not checked
    against any account.
    """

    email: Optional[str]
    original_name: str
    stored_name: str
    url: str
    timestamp: datetime

    def to_json(self) -> Dict[str, Any]:
        return {
            "email": self.email,
            "originalName": self.original_name,
            "storedName": self.stored_name,
            "url": self.url,
            "timestamp": isoformat(self.timestamp),
        }


@dataclass(frozen=True)
class Session:
    """Server-side record bound to the token carried in the session cookie."""

    token: str
    user_id: str
    issued_at: int
    expires_at: int

    def is_expired(self, now: int) -> bool:
        return self.expires_at <= now
