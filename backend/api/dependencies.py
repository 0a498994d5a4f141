"""Shared dependencies for API routes."""

from services.store import RecordStore
from services.store import get_store as _get_store


def get_store() -> RecordStore:
    return _get_store()
