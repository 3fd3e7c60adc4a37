"""Service layer modules for the Ascendia API."""

from . import auth_service, essay_service, upload_service

__all__ = [
    "auth_service",
    "essay_service",
    "upload_service",
]
