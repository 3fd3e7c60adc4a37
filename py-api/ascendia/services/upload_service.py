"""Service for storing essays uploaded as files."""

from __future__ import annotations

import os
import secrets
from typing import List, Optional

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ascendia.errors import ValidationError
from ascendia.models import UploadedEssay, utc_now
from ascendia.storage import UploadStore
from ascendia.utils.auth import now_millis

UPLOADS_URL_PREFIX = "/uploads"


def make_stored_name(original_name: str) -> str:
    """
    Build a collision-resistant file name for an upload.

    The name starts with the upload time in milliseconds and a random
    suffix; the sanitized original name is kept at the end for readability.
    """
    safe_name = secure_filename(original_name) or "essay"
    return f"{now_millis()}-{secrets.token_hex(4)}-{safe_name}"


def save_upload(
    uploads: UploadStore,
    upload_dir: str,
    file: Optional[FileStorage],
    email: Optional[str] = None,
) -> UploadedEssay:
    """
    Write an uploaded file to disk and record its metadata.

    Args:
        uploads: Upload store to append the record to
        upload_dir: Directory the bytes are written into
        file: The multipart file part, if the client sent one
        email: Client-supplied email, stored as given

    Returns:
        The recorded upload

    Raises:
        ValidationError: If no file was provided
    """
    if file is None or not file.filename:
        raise ValidationError("No file uploaded")

    os.makedirs(upload_dir, exist_ok=True)
    stored_name = make_stored_name(file.filename)
    file.save(os.path.join(upload_dir, stored_name))

    record = UploadedEssay(
        email=email or None,
        original_name=file.filename,
        stored_name=stored_name,
        url=f"{UPLOADS_URL_PREFIX}/{stored_name}",
        timestamp=utc_now(),
    )
    uploads.append(record)
    return record


def list_uploads(uploads: UploadStore) -> List[UploadedEssay]:
    return uploads.all()
