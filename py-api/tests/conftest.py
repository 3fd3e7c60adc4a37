"""Shared pytest fixtures for the Flask application."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the application package is importable during tests.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ascendia.main import create_app  # noqa: E402
from ascendia.storage import Storage  # noqa: E402

TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def storage() -> Storage:
    """Provide fresh in-memory stores for each test."""
    return Storage.in_memory()


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def app(storage: Storage, upload_dir: Path):
    app = create_app(
        config={
            "TESTING": True,
            "SESSION_SECRET": "test-secret",
            "BCRYPT_ROUNDS": TEST_BCRYPT_ROUNDS,
            "UPLOAD_DIR": str(upload_dir),
        },
        storage=storage,
    )
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
