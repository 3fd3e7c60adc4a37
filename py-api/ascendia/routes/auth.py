"""Signup, login and logout routes backed by cookie sessions."""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify

from ascendia.errors import AuthError, ConflictError, ValidationError, error_response
from ascendia.models import Session
from ascendia.services import auth_service
from ascendia.storage import get_storage
from ascendia.utils.auth import end_session, login_required, start_session
from ascendia.utils.http import read_payload

bp = Blueprint("auth", __name__)


def _read_credentials(payload: Dict[str, Any]):
    email = payload.get("email")
    password = payload.get("password")
    if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
        raise ValidationError("Email and password required")
    return email, password


@bp.post("/signup")
def signup():
    """Register a user and log them in."""
    try:
        email, password = _read_credentials(read_payload())
        if len(password.encode("utf-8")) > auth_service.MAX_PASSWORD_BYTES:
            raise ValidationError("Password is too long")
        user_id = auth_service.create_user(
            get_storage().users,
            email,
            password,
            rounds=current_app.config["BCRYPT_ROUNDS"],
        )
    except (ValidationError, ConflictError) as exc:
        return error_response(exc)

    start_session(user_id)
    current_app.logger.info("Created user %s", user_id)
    return jsonify(message="User created", userId=user_id), 200


@bp.post("/login")
def login():
    """Check credentials and bind a new session to the user."""
    payload = read_payload()
    email = payload.get("email")
    password = payload.get("password")

    user_id = None
    if isinstance(email, str) and isinstance(password, str):
        user_id = auth_service.verify_credentials(get_storage().users, email, password)

    if user_id is None:
        current_app.logger.warning("Failed login attempt")
        return error_response(AuthError("Invalid credentials"))

    start_session(user_id)
    current_app.logger.info("User %s logged in", user_id)
    return jsonify(message="Logged in"), 200


@bp.post("/logout")
def logout():
    """Destroy the current session, if there is one."""
    if end_session():
        current_app.logger.info("Session closed")
    return jsonify(message="Logged out"), 200


@bp.get("/session")
@login_required
def get_session_info(session: Session):
    """Return information about the current session."""
    return jsonify(userId=session.user_id, expiresAt=session.expires_at * 1000), 200
