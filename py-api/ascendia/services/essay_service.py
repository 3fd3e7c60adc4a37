"""Business logic for text essay submissions."""

from __future__ import annotations

from typing import Any, List

from ascendia.errors import ValidationError
from ascendia.models import Essay, utc_now
from ascendia.storage import EssayStore

MIN_ESSAY_LENGTH = 50


def validate_essay(text: Any) -> str:
    """Return ``text`` unchanged if it holds at least MIN_ESSAY_LENGTH non-padding characters."""
    if not isinstance(text, str) or len(text.strip()) < MIN_ESSAY_LENGTH:
        raise ValidationError("Essay text too short")
    return text


def submit_essay(essays: EssayStore, user_id: str, text: Any) -> Essay:
    essay = Essay(user_id=user_id, essay_text=validate_essay(text), submitted_at=utc_now())
    essays.append(essay)
    return essay


def list_essays(essays: EssayStore) -> List[Essay]:
    return essays.all()
