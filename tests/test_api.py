"""
Тести для REST API

Запуск: pytest tests/test_api.py -v
"""

import json
import logging

import pytest
from fastapi.testclient import TestClient

from stack_advisor.api import app, catalog_manager, session_manager
from stack_advisor.api.dependencies import AdvisorSession
from stack_advisor.catalog import DEFAULT_TREE_PATH
from stack_advisor.schemas import Candidate
from stack_advisor.walker import StackWalker


@pytest.fixture
def client():
    session_manager.clear()
    with TestClient(app) as test_client:
        yield test_client
    session_manager.clear()


def _create(client):
    response = client.post("/api/sessions")
    assert response.status_code == 200
    return response.json()


def test_root(client):
    data = client.get("/").json()

    assert data["name"] == "StackAdvisor API"
    assert data["health"] == "/health"


def test_health(client):
    data = client.get("/health").json()

    assert data["status"] == "ok"
    assert data["catalog_loaded"] is True
    assert data["catalog_size"] == 11
    assert data["question_bank_size"] == 12
    assert data["active_sessions"] == 0


def test_catalog(client):
    data = client.get("/api/catalog").json()

    assert data["total"] == 11
    assert data["candidates"][0]["name"] == "Next.js + Prisma"


def test_get_candidate(client):
    response = client.get("/api/catalog/django")
    assert response.status_code == 200
    assert response.json()["name"] == "Django"

    assert client.get("/api/catalog/cobol").status_code == 404


def test_questions(client):
    data = client.get("/api/questions").json()

    assert data["total"] == 12
    assert data["questions"][0]["id"] == "needs_auth"
    assert data["questions"][-1]["type"] == "multiple"


def test_create_session(client):
    data = _create(client)

    assert data["status"] == "active"
    assert data["remaining_count"] == 11
    assert data["asked_count"] == 0
    assert data["history"] == []
    assert data["next_question"] is not None
    assert data["recommendation"] is None
    assert data["minimum_questions"] == 4

    assert client.get("/health").json()["active_sessions"] == 1


def test_answer_question(client):
    session_id = _create(client)["session_id"]

    response = client.post(
        f"/api/sessions/{session_id}/answer",
        json={"question_id": "primary_focus", "answer": "Yes"},
    )
    assert response.status_code == 200

    data = response.json()
    assert data["asked_count"] == 1
    assert len(data["history"]) == 1
    assert data["history"][0]["question_id"] == "primary_focus"
    assert data["remaining_count"] == data["history"][0]["candidates_remaining"]
    assert all("frontend" in c["tags"] for c in data["remaining_candidates"])


def test_answer_errors(client):
    session_id = _create(client)["session_id"]
    url = f"/api/sessions/{session_id}/answer"

    response = client.post("/api/sessions/missing/answer", json={"question_id": "primary_focus", "answer": "Yes"})
    assert response.status_code == 404

    response = client.post(url, json={"question_id": "no_such_question", "answer": "Yes"})
    assert response.status_code == 404

    response = client.post(url, json={"question_id": "", "answer": "Yes"})
    assert response.status_code == 422

    assert client.post(url, json={"question_id": "needs_auth", "answer": "Yes"}).status_code == 200
    response = client.post(url, json={"question_id": "needs_auth", "answer": "No"})
    assert response.status_code == 409

    assert client.get(f"/api/sessions/{session_id}").json()["asked_count"] == 1


def test_undeclared_answer_empties_session(client):
    session_id = _create(client)["session_id"]

    data = client.post(
        f"/api/sessions/{session_id}/answer",
        json={"question_id": "primary_focus", "answer": "Maybe"},
    ).json()

    assert data["status"] == "empty"
    assert data["remaining_count"] == 0
    assert data["is_complete"] is True
    assert data["is_found"] is False
    assert data["next_question"] is None
    assert data["recommendation"] is None


def test_reset_session(client):
    session_id = _create(client)["session_id"]
    client.post(
        f"/api/sessions/{session_id}/answer",
        json={"question_id": "primary_focus", "answer": "No"},
    )

    data = client.post(f"/api/sessions/{session_id}/reset").json()

    assert data["session_id"] == session_id
    assert data["remaining_count"] == 11
    assert data["history"] == []


def test_delete_session(client):
    session_id = _create(client)["session_id"]

    response = client.delete(f"/api/sessions/{session_id}")
    assert response.json() == {"session_id": session_id, "deleted": True}

    assert client.get(f"/api/sessions/{session_id}").status_code == 404
    assert client.delete(f"/api/sessions/{session_id}").status_code == 404


def test_full_session(client):
    """Відповідати першим варіантом до завершення"""
    data = _create(client)
    session_id = data["session_id"]

    while data["next_question"] is not None:
        question = data["next_question"]
        data = client.post(
            f"/api/sessions/{session_id}/answer",
            json={"question_id": question["id"], "answer": question["answers"][0]},
        ).json()

    assert data["status"] in ("found", "empty", "exhausted")
    assert len(data["history"]) == data["asked_count"]
    assert len(data["path_summary"]) == data["asked_count"]
    if data["status"] == "found":
        assert data["recommendation"]["name"] == data["remaining_candidates"][0]["name"]


def test_found_session_logs_analytics(client, caplog):
    """FOUND → analytics-запис з назвою стеку"""
    caplog.set_level(logging.INFO, logger="stack_advisor.api.dependencies")
    session_id = _create(client)["session_id"]
    url = f"/api/sessions/{session_id}/answer"

    client.post(url, json={"question_id": "primary_focus", "answer": "Yes"})
    assert not [r for r in caplog.records if "Analytics" in r.getMessage()]

    data = client.post(url, json={"question_id": "team_size", "answer": "Large team"}).json()
    assert data["status"] == "found"
    assert data["recommendation"]["name"] == "SvelteKit"

    messages = [r.getMessage() for r in caplog.records if "Analytics" in r.getMessage()]
    assert messages == [f'Analytics: session {session_id} was recommended the "SvelteKit" stack']


def test_empty_session_logs_no_analytics(client, caplog):
    """EMPTY → analytics-запису немає"""
    caplog.set_level(logging.INFO, logger="stack_advisor.api.dependencies")
    session_id = _create(client)["session_id"]

    data = client.post(
        f"/api/sessions/{session_id}/answer",
        json={"question_id": "primary_focus", "answer": "Maybe"},
    ).json()

    assert data["status"] == "empty"
    assert not [r for r in caplog.records if "Analytics" in r.getMessage()]


class _LockCheckingWalker(StackWalker):
    """Запам'ятовує, чи був lock сесії захоплений під час читання рекомендації"""

    session = None
    lock_states = []

    def final_recommendation(self):
        self.lock_states.append(self.session.lock.locked())
        return super().final_recommendation()


def test_answer_reads_recommendation_under_lock():
    """Статус та рекомендація читаються під lock сесії"""
    stacks = [Candidate(name="Django", tags=("python",)), Candidate(name="Express", tags=("nodejs",))]
    walker = _LockCheckingWalker(stacks)
    walker.lock_states = []
    session = AdvisorSession("s1", walker)
    walker.session = session

    # javascript_ecosystem: Express → Yes, Django → No
    assert session.answer("javascript_ecosystem", "No")

    assert walker.lock_states == [True]
    assert not session.lock.locked()


def test_catalog_without_names_starts_limited(tmp_path):
    """Дерево з result без name: каталог не завантажено, сервер працює"""
    path = tmp_path / "tree.json"
    path.write_text(json.dumps({
        "start": {"id": "start", "result": {"description": "no name"}},
    }), encoding="utf-8")

    try:
        assert catalog_manager.load(str(path)) is False
        assert catalog_manager.is_loaded is False
        assert "missing name" in catalog_manager.error
        assert catalog_manager.candidates == ()
    finally:
        assert catalog_manager.load(str(DEFAULT_TREE_PATH)) is True
