"""Routes for submitting and listing text essays."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from ascendia.errors import ValidationError, error_response
from ascendia.models import Session
from ascendia.services import essay_service
from ascendia.storage import get_storage
from ascendia.utils.auth import login_required
from ascendia.utils.http import read_payload

bp = Blueprint("essays", __name__)


@bp.post("/submit-essay")
@login_required
def submit_essay(session: Session):
    """Store an essay for the logged-in user."""
    payload = read_payload()
    try:
        essay_service.submit_essay(get_storage().essays, session.user_id, payload.get("essay"))
    except ValidationError as exc:
        return error_response(exc)

    current_app.logger.info("Essay submitted by %s", session.user_id)
    return jsonify(message="Essay submitted for review"), 200


@bp.get("/essays")
def list_essays():
    """Return every submitted essay in submission order."""
    # Open to anyone; restricting this to reviewers is still undecided.
    essays = essay_service.list_essays(get_storage().essays)
    return jsonify([essay.to_json() for essay in essays]), 200
