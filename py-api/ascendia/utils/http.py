"""Request parsing helpers."""

from __future__ import annotations

from typing import Any, Dict

from flask import request


def read_payload() -> Dict[str, Any]:
    """Return the request body as a dict, accepting JSON or form-encoded input."""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()
