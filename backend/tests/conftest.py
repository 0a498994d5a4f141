"""Shared test configuration, pytest markers and record fixtures."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from models.records import Candidate, JobTarget
from services.store import InMemoryStore, load_store

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end ranking scenarios over in-memory records"
    )


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def records_path() -> Path:
    return FIXTURES_DIR / "records.json"


@pytest.fixture
def fixture_store(records_path) -> InMemoryStore:
    return load_store(records_path)


@pytest.fixture
def make_user():
    counter = {"n": 0}

    def _make(skills=None, **kwargs) -> Candidate:
        counter["n"] += 1
        kwargs.setdefault("id", f"user{counter['n']}")
        kwargs.setdefault("fullname", f"User {counter['n']}")
        kwargs.setdefault("email", f"user{counter['n']}@example.com")
        return Candidate(skills=skills or [], **kwargs)

    return _make


@pytest.fixture
def make_job():
    counter = {"n": 0}

    def _make(requirements=None, **kwargs) -> JobTarget:
        counter["n"] += 1
        kwargs.setdefault("id", f"job{counter['n']}")
        kwargs.setdefault("title", "")
        return JobTarget(requirements=requirements or [], **kwargs)

    return _make
