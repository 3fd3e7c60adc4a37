"""Admin listing routes."""

from __future__ import annotations

from flask import Blueprint, jsonify

from ascendia.services import upload_service
from ascendia.storage import get_storage

bp = Blueprint("admin", __name__, url_prefix="/admin")


@bp.get("/files")
def list_files():
    """List every uploaded essay file."""
    # No authentication yet, same as /essays.
    uploads = upload_service.list_uploads(get_storage().uploads)
    return jsonify([upload.to_json() for upload in uploads]), 200
