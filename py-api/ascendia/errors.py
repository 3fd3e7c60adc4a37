"""Error taxonomy mapped onto JSON error responses."""

from __future__ import annotations

from typing import Any, Tuple

from flask import Flask, jsonify
from werkzeug.exceptions import InternalServerError


class AscendiaError(Exception):
    """Base class for errors that translate into an HTTP status."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AscendiaError):
    """Malformed or missing input."""

    status_code = 400


class ConflictError(AscendiaError):
    """The resource already exists."""

    status_code = 409


class AuthError(AscendiaError):
    """Bad credentials or no authenticated session."""

    status_code = 401


def error_response(exc: AscendiaError) -> Tuple[Any, int]:
    """Render an error as ``{"error": message}`` with its status code."""
    return jsonify(error=exc.message), exc.status_code


def register_error_handlers(app: Flask) -> None:
    """Make sure uncaught errors still answer with a JSON body.

    Routes catch their own AscendiaError subclasses; the handler registered
    here only covers ones that escape a view.
    """
    app.register_error_handler(AscendiaError, error_response)

    @app.errorhandler(InternalServerError)
    def _internal_error(_exc: InternalServerError):
        return jsonify(error="Internal server error."), 500
