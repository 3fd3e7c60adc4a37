"""Environment-driven settings for the Flask application."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

DEFAULT_PORT = 3000
# Matches the historical default; anything deployed must override it.
DEFAULT_SESSION_SECRET = "ascendia_secret"
DEFAULT_SESSION_TTL_SECONDS = 24 * 60 * 60
DEFAULT_BCRYPT_ROUNDS = 10
DEFAULT_UPLOAD_DIR = Path(__file__).resolve().parents[1] / "uploads"


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


def parse_origins(value: Union[str, List[str], None]) -> Union[str, List[str]]:
    """Return ``"*"`` or a list of explicit origins from a comma separated value."""
    if value is None:
        return "*"
    if isinstance(value, str):
        if value.strip() == "*":
            return "*"
        return [origin.strip() for origin in value.split(",") if origin.strip()]
    return list(value)


def load_config() -> Dict[str, Any]:
    """Read settings from the process environment."""
    return {
        "PORT": int(os.getenv("PORT", DEFAULT_PORT)),
        "SESSION_SECRET": os.getenv("SESSION_SECRET") or DEFAULT_SESSION_SECRET,
        "SESSION_TTL_SECONDS": int(os.getenv("SESSION_TTL_SECONDS", DEFAULT_SESSION_TTL_SECONDS)),
        "BCRYPT_ROUNDS": int(os.getenv("BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS)),
        "UPLOAD_DIR": os.getenv("UPLOAD_DIR") or str(DEFAULT_UPLOAD_DIR),
        "MAX_UPLOAD_BYTES": _optional_int(os.getenv("MAX_UPLOAD_BYTES")),
        "CORS_ORIGINS": parse_origins(os.getenv("CORS_ORIGINS")),
    }
