"""Record store: the data-access collaborator for users and jobs.

Scoring reads one bulk snapshot per request; the store never runs inside the
scoring loop.
"""

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, ValidationError

from config import settings
from models.records import Candidate, JobTarget
from services.errors import DataAccessError

logger = logging.getLogger(__name__)


class RecordStore(ABC):
    """Read-only access to user and job records."""

    @abstractmethod
    def get_user(self, user_id: str) -> Candidate | None:
        """Return one user, or None when unknown."""

    @abstractmethod
    def get_job(self, job_id: str) -> JobTarget | None:
        """Return one job, or None when unknown."""

    @abstractmethod
    def list_job_seekers(self) -> list[Candidate]:
        """Return every user flagged as looking for a job."""

    @abstractmethod
    def list_open_jobs(self, now: datetime | None = None) -> list[JobTarget]:
        """Return every job whose deadline is absent or not yet past."""

    @abstractmethod
    def count(self) -> tuple[int, int]:
        """Return (number of users, number of jobs)."""


class _Snapshot(BaseModel):
    users: list[Candidate] = []
    jobs: list[JobTarget] = []


class InMemoryStore(RecordStore):
    def __init__(
        self,
        users: list[Candidate] | None = None,
        jobs: list[JobTarget] | None = None,
    ) -> None:
        self._users = {u.id: u for u in users or []}
        self._jobs = {j.id: j for j in jobs or []}

    def get_user(self, user_id: str) -> Candidate | None:
        return self._users.get(user_id)

    def get_job(self, job_id: str) -> JobTarget | None:
        return self._jobs.get(job_id)

    def list_job_seekers(self) -> list[Candidate]:
        return [u for u in self._users.values() if u.is_find_job]

    def list_open_jobs(self, now: datetime | None = None) -> list[JobTarget]:
        now = now or datetime.now(timezone.utc)
        open_jobs = []
        for job in self._jobs.values():
            if job.deadline is None:
                open_jobs.append(job)
                continue
            deadline = job.deadline
            if deadline.tzinfo is None:
                deadline = deadline.replace(tzinfo=timezone.utc)
            if deadline >= now:
                open_jobs.append(job)
        return open_jobs

    def count(self) -> tuple[int, int]:
        return len(self._users), len(self._jobs)


def load_store(path: str | Path) -> InMemoryStore:
    """Build an in-memory store from a JSON snapshot file."""
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
        snapshot = _Snapshot.model_validate(raw)
    except (OSError, json.JSONDecodeError) as e:
        raise DataAccessError(f"Could not read record snapshot {path}: {e}") from e
    except ValidationError as e:
        raise DataAccessError(
            f"Invalid record snapshot {path}",
            details={"errors": e.error_count()},
        ) from e

    logger.info(
        "Loaded %d users and %d jobs from %s",
        len(snapshot.users), len(snapshot.jobs), path,
    )
    return InMemoryStore(snapshot.users, snapshot.jobs)


_store: RecordStore | None = None


def get_store() -> RecordStore:
    """Return the process-wide store, loading settings.data_file on first use."""
    global _store
    if _store is None:
        if settings.data_file:
            _store = load_store(settings.data_file)
        else:
            logger.warning("No DATA_FILE set - serving an empty record store")
            _store = InMemoryStore()
    return _store


def set_store(store: RecordStore | None) -> None:
    """Replace the process-wide store. None resets to lazy loading."""
    global _store
    _store = store
