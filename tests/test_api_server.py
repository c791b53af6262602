from __future__ import annotations

from fastapi.testclient import TestClient
import pytest

from test_quiz_manager import answer_all
from trivia_quiz.constants.storage_constants import LATEST_RESULT_KEY
from trivia_quiz.server.api_server import create_api_app


@pytest.fixture
def client(quiz_manager) -> TestClient:
    return TestClient(create_api_app(quiz_manager))


def test_latest_result_absent_returns_404(client):
    response = client.get("/results/latest")

    assert response.status_code == 404


def test_latest_result_with_empty_stored_snapshot_returns_404(store, client):
    store.write(LATEST_RESULT_KEY, {"questions": [], "answers": [], "score": 0, "difficulty": "easy"})

    response = client.get("/results/latest")

    assert response.status_code == 404


def test_latest_result_after_completion(client, quiz_manager):
    quiz_manager.start_quiz("hard")
    answer_all(quiz_manager, correct=7)

    body = client.get("/results/latest").json()

    assert body["score"] == 7
    assert body["total_questions"] == 10
    assert body["percentage"] == 70
    assert body["difficulty"] == "hard"
    assert body["is_new_high_score"] is True
    assert body["message"] == "Great job! You did very well!"
    assert len(body["selected_answers"]) == len(body["questions"]) == 10


def test_high_scores_listing_and_best(client, quiz_manager):
    quiz_manager.start_quiz("easy")
    answer_all(quiz_manager, correct=4)
    quiz_manager.start_quiz("easy")
    answer_all(quiz_manager, correct=9)

    listing = client.get("/high-scores", params={"limit": 1}).json()
    assert [row["score"] for row in listing] == [9]

    best = client.get("/high-scores/easy/best").json()
    assert best["percentage"] == 90
    assert best["total_questions"] == 10


def test_best_for_difficulty_without_entries_is_404(client):
    assert client.get("/high-scores/medium/best").status_code == 404


def test_unknown_difficulty_is_422(client):
    assert client.get("/high-scores/impossible/best").status_code == 422
    assert client.get("/high-scores", params={"difficulty": "impossible"}).status_code == 422


def test_difficulties_listing(client):
    levels = [item["level"] for item in client.get("/difficulties").json()]

    assert levels == ["easy", "medium", "hard"]


def test_leaderboard_page_renders_html(client, quiz_manager):
    quiz_manager.start_quiz("medium")
    answer_all(quiz_manager, correct=5)

    response = client.get("/")

    assert response.status_code == 200
    assert "<table>" in response.text
    assert "5/10" in response.text
