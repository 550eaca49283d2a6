"""Pytest fixtures."""

import pathlib

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.services.student.student import StudentStore


@pytest.fixture
def settings(tmp_path: pathlib.Path) -> Settings:
    """Settings pointing at a fresh SQLite file."""
    return Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'students.db'}")


@pytest.fixture
def empty_store(settings: Settings) -> StudentStore:
    """A store whose STUDENT_DETAILS table exists and is empty."""
    store = StudentStore.from_settings(settings)
    store.ensure_table()
    return store


@pytest.fixture
def client(settings: Settings, empty_store: StudentStore):
    """API client; the context manager runs the startup bootstrap."""
    app = create_app(settings=settings, store=empty_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def ann() -> dict:
    return {"name": "Ann", "email": "a@b.com", "age": 20, "gender": "f"}
