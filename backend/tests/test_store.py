import json
from datetime import timedelta

import pytest

from services import store as store_module
from services.errors import DataAccessError
from services.recommendation import find_potential_applicants_for_job
from services.store import InMemoryStore, RecordStore, get_store, load_store, set_store


def test_load_store_reads_snapshot(fixture_store):
    assert fixture_store.count() == (4, 3)
    user = fixture_store.get_user("u1")
    assert user.fullname == "Linh Tran"
    assert user.last_activity_at.year == 2026
    assert fixture_store.get_job("j1").company.id == "c1"


def test_unknown_ids(fixture_store):
    assert fixture_store.get_user("nope") is None
    assert fixture_store.get_job("nope") is None


def test_list_job_seekers(fixture_store):
    ids = {u.id for u in fixture_store.list_job_seekers()}
    assert ids == {"u1", "u2", "u3"}


def test_list_open_jobs_skips_expired(fixture_store, now):
    ids = {j.id for j in fixture_store.list_open_jobs(now)}
    assert ids == {"j1", "j2"}


def test_job_without_deadline_is_open(make_job, now):
    store = InMemoryStore(jobs=[make_job(["python"]), make_job(["go"], deadline=now + timedelta(hours=1))])
    assert len(store.list_open_jobs(now)) == 2


def test_load_store_missing_file(tmp_path):
    with pytest.raises(DataAccessError):
        load_store(tmp_path / "missing.json")


def test_load_store_invalid_json(tmp_path):
    path = tmp_path / "records.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DataAccessError):
        load_store(path)


def test_load_store_invalid_records(tmp_path):
    path = tmp_path / "records.json"
    path.write_text(json.dumps({"users": [{"id": "u1"}]}), encoding="utf-8")
    with pytest.raises(DataAccessError) as exc_info:
        load_store(path)
    assert exc_info.value.details["errors"] >= 1


def test_load_store_accepts_null_fields(tmp_path):
    path = tmp_path / "records.json"
    path.write_text(json.dumps({
        "users": [
            {"id": "u1", "fullname": "Null Skills", "skills": None, "bio": None},
            {"id": "u2", "fullname": "Has Skills", "skills": ["python", "docker"]},
        ],
        "jobs": [{
            "id": "j1",
            "title": "Python Developer",
            "description": None,
            "requirements": None,
            "benefits": None,
            "applications": None,
            "company": {"id": "c1", "name": "Acme", "website": None},
        }],
    }), encoding="utf-8")

    store = load_store(path)
    assert store.count() == (2, 1)
    assert store.get_user("u1").skills == []
    job = store.get_job("j1")
    assert job.description == ""
    assert job.requirements == []
    assert job.applications == []
    assert job.company.website == ""

    result = find_potential_applicants_for_job(store, job)
    assert result.success
    assert result.data == []


def test_record_store_requires_count():
    class NoCountStore(RecordStore):
        def get_user(self, user_id):
            return None

        def get_job(self, job_id):
            return None

        def list_job_seekers(self):
            return []

        def list_open_jobs(self, now=None):
            return []

    with pytest.raises(TypeError):
        NoCountStore()


def test_get_store_without_data_file(monkeypatch):
    monkeypatch.setattr(store_module.settings, "data_file", "")
    set_store(None)
    try:
        store = get_store()
        assert store.count() == (0, 0)
        assert get_store() is store
    finally:
        set_store(None)


def test_get_store_loads_data_file(monkeypatch, records_path):
    monkeypatch.setattr(store_module.settings, "data_file", str(records_path))
    set_store(None)
    try:
        assert get_store().count() == (4, 3)
    finally:
        set_store(None)
