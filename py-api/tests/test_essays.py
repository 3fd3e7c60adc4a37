"""Tests for essay submission and listing."""

from __future__ import annotations

import pytest

from ascendia.errors import ValidationError
from ascendia.services import essay_service
from ascendia.storage import InMemoryEssayStore


def logged_in(client, email="a@x.com", password="pw123456") -> str:
    response = client.post("/signup", json={"email": email, "password": password})
    return response.get_json()["userId"]


def test_essay_of_exactly_fifty_trimmed_characters_is_accepted(client):
    logged_in(client)

    response = client.post("/submit-essay", json={"essay": "   " + "b" * 50 + "\n\t"})

    assert response.status_code == 200
    assert response.get_json() == {"message": "Essay submitted for review"}


def test_essay_of_forty_nine_trimmed_characters_is_rejected(client, storage):
    logged_in(client)

    response = client.post("/submit-essay", json={"essay": "   " + "b" * 49 + "   "})

    assert response.status_code == 400
    assert response.get_json() == {"error": "Essay text too short"}
    assert storage.essays.all() == []


def test_missing_or_non_text_essay_is_rejected(client):
    logged_in(client)

    assert client.post("/submit-essay", json={}).status_code == 400
    assert client.post("/submit-essay", json={"essay": ""}).status_code == 400
    assert client.post("/submit-essay", json={"essay": 12345}).status_code == 400


def test_submitted_essays_are_listed_in_order(client):
    user_id = logged_in(client)
    texts = [f"essay number {index} " + "x" * 60 for index in range(4)]

    for text in texts:
        assert client.post("/submit-essay", json={"essay": text}).status_code == 200

    listed = client.get("/essays").get_json()

    assert [entry["essayText"] for entry in listed] == texts
    assert all(entry["userId"] == user_id for entry in listed)
    timestamps = [entry["submittedAt"] for entry in listed]
    assert timestamps == sorted(timestamps)


def test_full_signup_login_submit_scenario(app):
    anonymous = app.test_client()
    signup = anonymous.post("/signup", json={"email": "a@x.com", "password": "pw123456"})
    assert signup.status_code == 200
    user_id = signup.get_json()["userId"]

    client = app.test_client()
    assert client.post("/login", json={"email": "a@x.com", "password": "pw123456"}).status_code == 200
    assert client.get("/session").get_json()["userId"] == user_id

    assert client.post("/submit-essay", json={"essay": "c" * 49}).status_code == 400
    accepted = "d" * 55
    assert client.post("/submit-essay", json={"essay": accepted}).status_code == 200

    listed = client.get("/essays").get_json()
    assert len(listed) == 1
    assert listed[0]["essayText"] == accepted
    assert listed[0]["userId"] == user_id


def test_essays_listing_is_open_to_anonymous_clients(client):
    response = client.get("/essays")

    assert response.status_code == 200
    assert response.get_json() == []


def test_service_keeps_text_untrimmed():
    essays = InMemoryEssayStore()
    text = "  " + "e" * 50 + "  "

    essay = essay_service.submit_essay(essays, "user-1", text)

    assert essay.essay_text == text
    assert essay_service.list_essays(essays) == [essay]

    with pytest.raises(ValidationError):
        essay_service.submit_essay(essays, "user-1", "too short")
