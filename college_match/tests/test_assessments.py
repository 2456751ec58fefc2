from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from college_match.app import app, get_store
from college_match.assessments.service import has_assessment, save_assessment
from college_match.errors import StorageError, ValidationError
from college_match.storage import InMemoryRecordStore

client = TestClient(app)


def _use(store: InMemoryRecordStore) -> InMemoryRecordStore:
    app.dependency_overrides[get_store] = lambda: store
    return store


def teardown_function():
    app.dependency_overrides.clear()


def test_save_assessment_inserts():
    store = InMemoryRecordStore()
    assert save_assessment(store, {"username": "asha", "stream": "Science"}) == {"status": "success"}
    assert len(store.assessments) == 1
    assert store.assessments[0]["stream"] == "Science"
    assert "savedAt" in store.assessments[0]


def test_save_assessment_twice_keeps_one_record():
    store = InMemoryRecordStore()
    save_assessment(store, {"username": "asha", "stream": "Science", "specializedFields": ["Physics"]})
    save_assessment(store, {"username": "asha", "stream": "Commerce", "specializedFields": ["Banking"]})
    assert len(store.assessments) == 1
    assert store.assessments[0]["stream"] == "Commerce"
    assert store.assessments[0]["specializedFields"] == ["Banking"]


def test_save_assessment_alias_replaces_legacy_record():
    store = InMemoryRecordStore(assessments=[
        {"userId": "asha", "stream": "Arts"},
        {"username": "ravi", "stream": "Science"},
    ])
    save_assessment(store, {"userId": "asha", "stream": "Medical"})
    assert [a["username"] for a in store.assessments] == ["asha", "ravi"]
    assert store.assessments[0]["stream"] == "Medical"
    assert "userId" not in store.assessments[0]


def test_save_assessment_requires_owner():
    store = InMemoryRecordStore()
    with pytest.raises(ValidationError) as excinfo:
        save_assessment(store, {"stream": "Science"})
    assert excinfo.value.status_code == 400


def test_has_assessment():
    store = InMemoryRecordStore(assessments=[{"username": "asha"}])
    assert has_assessment(store, "asha")
    assert not has_assessment(store, "ravi")


# ── Endpoints ────────────────────────────────────────────────────────────


def test_save_and_check_endpoints():
    store = _use(InMemoryRecordStore())
    resp = client.get("/check-assessment/asha")
    assert resp.json() == {"hasTakenAssessment": False}

    resp = client.post("/save-assessment", json={
        "username": "asha",
        "stream": "Science",
        "specializedFields": ["Data Science"],
        "score": 42,
    })
    assert resp.status_code == 200
    assert resp.json() == {"status": "success"}
    assert store.assessments[0]["score"] == 42

    resp = client.get("/check-assessment/asha")
    assert resp.json() == {"hasTakenAssessment": True}


def test_save_endpoint_accepts_user_id_alias():
    store = _use(InMemoryRecordStore())
    resp = client.post("/save-assessment", json={"userId": "asha", "stream": "Science"})
    assert resp.status_code == 200
    assert store.assessments[0]["username"] == "asha"


def test_save_endpoint_missing_owner():
    _use(InMemoryRecordStore())
    resp = client.post("/save-assessment", json={"stream": "Science"})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Username is required"}


def test_get_assessment_endpoint():
    _use(InMemoryRecordStore(assessments=[{"username": "asha", "stream": "Science"}]))
    assert client.get("/get-assessment/asha").json() == {"username": "asha", "stream": "Science"}
    assert client.get("/get-assessment/ravi").status_code == 404


class _ReadOnlyStore(InMemoryRecordStore):
    def save_assessments(self, assessments):
        return False


def test_save_assessment_write_failure():
    with pytest.raises(StorageError) as excinfo:
        save_assessment(_ReadOnlyStore(), {"username": "asha"})
    assert excinfo.value.status_code == 500


def test_save_endpoint_write_failure():
    _use(_ReadOnlyStore())
    resp = client.post("/save-assessment", json={"username": "asha", "stream": "Science"})
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to save assessment"}
