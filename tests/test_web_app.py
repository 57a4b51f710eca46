"""Tests for the Flask JSON surface."""

import pytest

from conftest import make_controller, right_option, wrong_option
from core.session import SESSION_LENGTH
from web.app import create_app


@pytest.fixture
def session_controller(clock):
    return make_controller(clock=clock)


@pytest.fixture
def client(session_controller):
    app = create_app(session_controller)
    app.config["TESTING"] = True
    return app.test_client()


def test_index_lists_grades(client):
    body = client.get("/").get_json()
    assert [grade["id"] for grade in body["grades"]] == [
        "Middle1", "Middle2", "Middle3", "High1", "High2", "High3",
    ]
    assert body["grades"][0]["topics"][0] == {"id": "m1_integer", "title": "Integers and Rational Numbers"}


def test_empty_session_snapshot(client):
    body = client.get("/session").get_json()
    assert body["phase"] == "no_session"
    assert body["problems"] == []
    assert body["current_problem"] is None
    assert body["total_slots"] == SESSION_LENGTH


def test_start_session(client):
    response = client.post("/session/start", json={"grade": "Middle3"})
    body = response.get_json()

    assert response.status_code == 200
    assert body["applied"] is True
    assert body["phase"] == "active"
    assert body["current_grade"] == "Middle3"
    assert body["current_problem"]["type"] == "m3_root"
    assert len(body["current_problem"]["options"]) == 4
    assert body["attempt"] == 1


def test_start_rejects_unknown_grade(client):
    response = client.post("/session/start", json={"grade": "Grade9"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "invalid request"


def test_second_start_is_not_applied(client):
    client.post("/session/start", json={"grade": "Middle1"})
    body = client.post("/session/start", json={"grade": "High1"}).get_json()
    assert body["applied"] is False
    assert body["current_grade"] == "Middle1"


@pytest.mark.parametrize("payload", [{"option": 7}, {"option": -1}, {}])
def test_answer_validates_option(client, payload):
    client.post("/session/start", json={"grade": "Middle1"})
    assert client.post("/session/answer", json=payload).status_code == 400


def test_answer_then_advance(client, session_controller):
    client.post("/session/start", json={"grade": "Middle1"})

    body = client.post("/session/answer", json={"option": wrong_option(session_controller)}).get_json()
    assert body["applied"] is True
    assert body["results"] == [False]
    assert body["next_action"] == "retry"

    body = client.post("/session/advance").get_json()
    assert body["applied"] is True
    assert body["retry_count"] == 1
    assert body["attempt"] == 2
    assert body["next_action"] is None

    body = client.post("/session/answer", json={"option": right_option(session_controller)}).get_json()
    assert body["next_action"] == "next"


def test_advance_before_answer_not_applied(client):
    client.post("/session/start", json={"grade": "High2"})
    body = client.post("/session/advance").get_json()
    assert body["applied"] is False
    assert body["current_index"] == 0


def test_report_requires_finished_session(client, session_controller):
    assert client.get("/session/report").status_code == 409

    client.post("/session/start", json={"grade": "High1"})
    assert client.get("/session/report").status_code == 409

    for _ in range(SESSION_LENGTH):
        session_controller.submit_answer(right_option(session_controller))
        session_controller.advance()

    response = client.get("/session/report")
    body = response.get_json()
    assert response.status_code == 200
    assert body["score"] == SESSION_LENGTH
    assert body["percentage"] == 100
    assert body["message_band"] == "excellent"
    assert len(body["slots"]) == SESSION_LENGTH
    assert sum(topic["total"] for topic in body["topics"]) == SESSION_LENGTH


def test_reset(client):
    client.post("/session/start", json={"grade": "Middle2"})
    body = client.post("/session/reset").get_json()
    assert body["phase"] == "no_session"
    assert body["current_grade"] is None
    assert "applied" not in body
