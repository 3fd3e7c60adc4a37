"""Routes for essays submitted as file uploads."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request, send_from_directory

from ascendia.errors import ValidationError, error_response
from ascendia.services import upload_service
from ascendia.storage import get_storage

bp = Blueprint("uploads", __name__)


@bp.post("/upload-essay")
def upload_essay():
    """Accept an essay file along with the email the client claims to own."""
    try:
        record = upload_service.save_upload(
            get_storage().uploads,
            current_app.config["UPLOAD_DIR"],
            request.files.get("essay"),
            email=request.form.get("email"),
        )
    except ValidationError as exc:
        return error_response(exc)

    current_app.logger.info("Stored upload %s", record.stored_name)
    return jsonify(message="Essay uploaded successfully", file=record.to_json()), 200


@bp.get(f"{upload_service.UPLOADS_URL_PREFIX}/<path:filename>")
def uploaded_file(filename: str):
    """Serve a previously uploaded file."""
    return send_from_directory(current_app.config["UPLOAD_DIR"], filename)
