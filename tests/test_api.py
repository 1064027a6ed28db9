import random
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app import app
from conftest import RESUME, long_answer
from talentscreen.api import ScreeningService, get_service
from talentscreen.errors import PersistenceError
from talentscreen.interview import InterviewSession, InterviewSessionManager, LocalQuestionStrategy, QuestionGenerator
from talentscreen.models import JobDescription
from talentscreen.persistence import ScoreSubmitter

JOB = {"title": "Backend Engineer", "skills": "Python, SQL, Docker", "description": "Data APIs"}
ANSWER = long_answer("I built a reporting service in Python backed by SQL over 3 years.")


def _session_factory(job, resume, candidate_name, api_key):
    generator = QuestionGenerator(strategies=[LocalQuestionStrategy(rng=random.Random(11))])
    return InterviewSession(job, resume, candidate_name=candidate_name, question_generator=generator)


@pytest.fixture
def service():
    return ScreeningService(
        session_manager=InterviewSessionManager(),
        submitter=MagicMock(spec=ScoreSubmitter),
        session_factory=_session_factory
    )


@pytest.fixture
def client(service):
    app.dependency_overrides[get_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def _analyze(client, **overrides):
    body = {"candidate_name": "Jane Doe", "resume": RESUME, "job": JOB}
    body.update(overrides)
    return client.post("/analyze", json=body)


def _complete_interview(client):
    session_id = _analyze(client).json()["session_id"]
    questions = client.post(f"/interview/{session_id}/start", json={"confirmed": True}).json()["questions"]
    for i in range(len(questions)):
        assert client.put(f"/interview/{session_id}/answers/{i}", json={"answer": ANSWER}).status_code == 200
        if i < len(questions) - 1:
            assert client.post(f"/interview/{session_id}/next").json()["current_question_index"] == i + 1
    return session_id


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_analyze_reports_match_and_gate(client):
    response = _analyze(client)

    assert response.status_code == 200
    data = response.json()
    assert data["analysis"]["percent"] == 67
    assert data["analysis"]["weaknesses"] == ["docker"]
    assert data["auto_proceed"] is False
    assert data["threshold"] == 70


def test_analyze_accepts_skill_lists(client):
    response = _analyze(client, job={"title": "Dev", "skills": ["Python", "SQL"]})
    assert response.json()["analysis"]["percent"] == 100
    assert response.json()["auto_proceed"] is True


def test_job_without_skills_is_unprocessable(client, service):
    response = _analyze(client, job={"title": "Dev", "skills": ""})
    assert response.status_code == 422
    assert len(service.sessions) == 0


def test_start_requires_confirmation_below_threshold(client):
    session_id = _analyze(client).json()["session_id"]

    assert client.post(f"/interview/{session_id}/start", json={"confirmed": False}).status_code == 409

    response = client.post(f"/interview/{session_id}/start", json={"confirmed": True})
    assert response.status_code == 200
    assert len(response.json()["questions"]) == 5
    assert response.json()["current_question_index"] == 0


def test_brief_answer_is_flagged(client):
    session_id = _analyze(client).json()["session_id"]
    client.post(f"/interview/{session_id}/start", json={"confirmed": True})

    response = client.put(f"/interview/{session_id}/answers/0", json={"answer": "Yes."})
    assert response.status_code == 200
    assert response.json()["too_brief"] is True

    assert client.put(f"/interview/{session_id}/answers/0", json={"answer": " "}).status_code == 422
    assert client.put(f"/interview/{session_id}/answers/7", json={"answer": "Yes."}).status_code == 422


def test_finish_and_submit(client, service):
    session_id = _complete_interview(client)

    response = client.post(f"/interview/{session_id}/finish")
    assert response.status_code == 200
    result = response.json()
    assert result["composite_score"] == 77
    assert result["status"] == "Selected"
    assert result["candidate_name"] == "Jane Doe"
    assert len(result["answer_scores"]) == 5

    response = client.post(f"/interview/{session_id}/submit")
    assert response.status_code == 200
    assert response.json()["score"] == 77
    service.submitter.submit.assert_called_once()

    status = client.get(f"/interview/{session_id}").json()
    assert status["status"] == "completed"
    assert status["composite_score"] == 77


def test_failed_submission_keeps_result(client, service):
    session_id = _complete_interview(client)
    client.post(f"/interview/{session_id}/finish")
    service.submitter.submit.side_effect = PersistenceError("Error saving result: HTTP 500", score=77)

    response = client.post(f"/interview/{session_id}/submit")
    assert response.status_code == 502
    assert "try saving again" in response.json()["detail"]

    service.submitter.submit.side_effect = None
    assert client.post(f"/interview/{session_id}/submit").status_code == 200


def test_finish_before_all_answers_conflicts(client):
    session_id = _analyze(client).json()["session_id"]
    client.post(f"/interview/{session_id}/start", json={"confirmed": True})
    assert client.post(f"/interview/{session_id}/finish").status_code == 409


def test_submit_without_result_conflicts(client):
    session_id = _analyze(client).json()["session_id"]
    assert client.post(f"/interview/{session_id}/submit").status_code == 409


def test_unknown_session(client):
    assert client.get("/interview/missing").status_code == 404
    assert client.post("/interview/missing/start", json={"confirmed": True}).status_code == 404


def test_discard_session(client, service):
    session_id = _analyze(client).json()["session_id"]
    assert client.delete(f"/interview/{session_id}").status_code == 204
    assert client.get(f"/interview/{session_id}").status_code == 404
    assert len(service.sessions) == 0


def test_earlier_answers_are_frozen(client):
    session_id = _analyze(client).json()["session_id"]
    client.post(f"/interview/{session_id}/start", json={"confirmed": True})

    assert client.put(f"/interview/{session_id}/answers/2", json={"answer": ANSWER}).status_code == 422
    client.put(f"/interview/{session_id}/answers/0", json={"answer": ANSWER})
    assert client.post(f"/interview/{session_id}/next").status_code == 200
    assert client.put(f"/interview/{session_id}/answers/0", json={"answer": "rewritten"}).status_code == 422


def test_next_without_answer_is_unprocessable(client):
    session_id = _analyze(client).json()["session_id"]
    client.post(f"/interview/{session_id}/start", json={"confirmed": True})
    assert client.post(f"/interview/{session_id}/next").status_code == 422


def test_next_on_last_question_completes(client):
    session_id = _complete_interview(client)

    response = client.post(f"/interview/{session_id}/next")
    assert response.status_code == 200
    assert response.json()["completed"] is True

    assert client.post(f"/interview/{session_id}/finish").json()["composite_score"] == 77
    assert client.post(f"/interview/{session_id}/start", json={"confirmed": True}).status_code == 409


def test_injected_registries_are_not_shared():
    first = ScreeningService(session_manager=InterviewSessionManager(), submitter=MagicMock(spec=ScoreSubmitter))
    second = ScreeningService(session_manager=InterviewSessionManager(), submitter=MagicMock(spec=ScoreSubmitter))

    assert first.sessions is not second.sessions
    first.sessions.create_session(
        JobDescription.from_record(JOB), RESUME,
        question_generator=QuestionGenerator(strategies=[LocalQuestionStrategy()])
    )
    assert len(first.sessions) == 1
    assert len(second.sessions) == 0
