"""Authentication helpers for session and token management."""

from __future__ import annotations

import secrets
import time
from functools import wraps
from typing import Any, Callable, Optional, Tuple

from flask import Flask, current_app
from flask import session as cookie_session

from ascendia.errors import AuthError, error_response
from ascendia.models import Session
from ascendia.storage import get_storage

# Key inside the signed cookie that holds the server-side session token.
SESSION_TOKEN_KEY = "sid"


def now_seconds() -> int:
    """Return the current UNIX timestamp in seconds."""
    return int(time.time())


def now_millis() -> int:
    """Return the current UNIX timestamp in milliseconds."""
    return int(time.time() * 1000)


def generate_token(prefix: str = "sess") -> str:
    """Return an opaque random token with the given prefix."""
    return f"{prefix}_{secrets.token_urlsafe(24)}"


def start_session(user_id: str) -> Session:
    """Bind a fresh server-side session to ``user_id`` and point the cookie at it."""
    sessions = get_storage().sessions

    previous = cookie_session.get(SESSION_TOKEN_KEY)
    if isinstance(previous, str):
        sessions.delete(previous)

    issued_at = now_seconds()
    record = Session(
        token=generate_token("sess"),
        user_id=user_id,
        issued_at=issued_at,
        expires_at=issued_at + current_app.config["SESSION_TTL_SECONDS"],
    )
    sessions.put(record)

    cookie_session.clear()
    cookie_session[SESSION_TOKEN_KEY] = record.token
    cookie_session.permanent = True
    return record


def end_session() -> bool:
    """Destroy the server-side session referenced by the cookie, if any."""
    token = cookie_session.pop(SESSION_TOKEN_KEY, None)
    cookie_session.clear()
    if not isinstance(token, str):
        return False
    return get_storage().sessions.delete(token)


def resolve_session() -> Optional[Session]:
    """Return the authenticated session for this request, or ``None`` when anonymous."""
    token = cookie_session.get(SESSION_TOKEN_KEY)
    if not isinstance(token, str):
        return None

    sessions = get_storage().sessions
    record = sessions.get(token)
    if record is None:
        return None

    if record.is_expired(now_seconds()):
        sessions.delete(token)
        return None

    return record


def require_session() -> Tuple[Optional[Session], Optional[Any]]:
    """Return the current session, or a 401 response when there is none."""
    record = resolve_session()
    if record is None:
        return None, error_response(AuthError("Unauthorized"))
    return record, None


def login_required(view: Callable[..., Any]) -> Callable[..., Any]:
    """Reject anonymous requests; pass the resolved session to the view as its first argument."""

    @wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        record, error = require_session()
        if error is not None:
            return error
        return view(record, *args, **kwargs)

    return wrapper


def prune_expired() -> int:
    """Remove stale sessions from the session store."""
    return get_storage().sessions.prune(now_seconds())


def register_session_cleanup(app: Flask) -> None:
    """Attach a before-request handler that keeps session state tidy."""

    @app.before_request  # pragma: no cover - trivial wiring
    def _cleanup_state() -> None:
        prune_expired()
