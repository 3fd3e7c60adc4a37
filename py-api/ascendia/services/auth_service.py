"""Service for registering users and checking their credentials."""

from __future__ import annotations

import uuid
from typing import Optional

import bcrypt

from ascendia.config import DEFAULT_BCRYPT_ROUNDS
from ascendia.errors import ConflictError
from ascendia.models import User
from ascendia.storage import CredentialStore

# bcrypt only looks at the first 72 bytes of a secret.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """
    Hash a plaintext password with a freshly generated bcrypt salt.

    Args:
        password: The plaintext password
        rounds: bcrypt cost factor

    Returns:
        The bcrypt hash as text
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    """Compare a plaintext password against a stored bcrypt hash."""
    secret = password.encode("utf-8")
    if len(secret) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(secret, password_hash.encode("utf-8"))


def create_user(
    users: CredentialStore,
    email: str,
    password: str,
    rounds: int = DEFAULT_BCRYPT_ROUNDS,
) -> str:
    """
    Register a new user.

    Args:
        users: Credential store to write into
        email: Unique login email
        password: Plaintext password, hashed before storage
        rounds: bcrypt cost factor

    Returns:
        The generated user id

    Raises:
        ConflictError: If the email is already registered
    """
    if users.get(email) is not None:
        raise ConflictError("User already exists")

    user = User(
        email=email,
        password_hash=hash_password(password, rounds),
        user_id=str(uuid.uuid4()),
    )

    # Another request may have registered the email while we were hashing.
    if not users.add(user):
        raise ConflictError("User already exists")

    return user.user_id


def verify_credentials(users: CredentialStore, email: str, password: str) -> Optional[str]:
    """
    Check an email/password pair.

    Returns:
        The user id when the password matches, None otherwise
    """
    user = users.get(email)
    if user is None:
        return None
    if not check_password(password, user.password_hash):
        return None
    return user.user_id
