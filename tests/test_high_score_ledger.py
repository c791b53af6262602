from __future__ import annotations

import pytest

from conftest import BrokenStore
from trivia_quiz.constants.storage_constants import HIGH_SCORES_KEY
from trivia_quiz.core.errors import PersistenceError, PreconditionError
from trivia_quiz.core.models import Difficulty, compute_percentage
from trivia_quiz.core.services.high_score_ledger import HighScoreLedger
from trivia_quiz.core.storage import InMemoryStore


def test_fresh_difficulty_record_is_new_best(ledger):
    assert ledger.is_new_best(7, 10, "hard") is True

    entry = ledger.record(7, 10, "hard")

    assert entry.percentage == 70
    assert entry.difficulty is Difficulty.HARD
    assert entry.total_questions == 10
    assert entry.timestamp.startswith("2026-01-01T12:00")


def test_equal_percentage_is_not_new_best(ledger):
    ledger.record(7, 10, "easy")

    assert ledger.is_new_best(7, 10, "easy") is False
    assert ledger.is_new_best(14, 20, "easy") is False
    assert ledger.is_new_best(8, 10, "easy") is True


def test_new_best_is_per_difficulty(ledger):
    ledger.record(9, 10, "easy")

    assert ledger.is_new_best(5, 10, "medium") is True


def test_record_persists_whole_collection(store, ledger):
    ledger.record(5, 10, "easy")
    ledger.record(6, 10, "medium")

    stored = store.read(HIGH_SCORES_KEY)
    assert [item["percentage"] for item in stored] == [50, 60]
    assert stored[0]["totalQuestions"] == 10


def test_best_for_breaks_ties_by_earliest_timestamp(ledger):
    first = ledger.record(8, 10, "medium")
    ledger.record(8, 10, "medium")
    ledger.record(3, 10, "medium")

    assert ledger.best_for("medium") == first
    assert ledger.best_for("hard") is None


def test_all_entries_sorted_by_percentage_then_most_recent(ledger):
    older = ledger.record(6, 10, "easy")
    top = ledger.record(9, 10, "hard")
    newer = ledger.record(6, 10, "medium")

    assert ledger.all_entries() == [top, newer, older]


def test_all_entries_does_not_reorder_storage(store, ledger):
    ledger.record(2, 10, "easy")
    ledger.record(9, 10, "easy")
    ledger.all_entries()

    assert [item["score"] for item in store.read(HIGH_SCORES_KEY)] == [2, 9]


def test_top_entries_limits_results(ledger):
    for score in range(8):
        ledger.record(score, 10, "easy")

    top = ledger.top_entries(5)
    assert [entry.score for entry in top] == [7, 6, 5, 4, 3]


def test_commit_attempt_evaluates_before_recording(ledger):
    entry, is_new = ledger.commit_attempt(7, 10, "hard")
    assert entry.percentage == 70
    assert is_new is True

    _, is_new_again = ledger.commit_attempt(7, 10, "hard")
    assert is_new_again is False
    assert len(ledger.all_entries()) == 2


def test_zero_total_is_rejected(ledger, store):
    with pytest.raises(PreconditionError):
        ledger.record(0, 0, "easy")
    assert store.read(HIGH_SCORES_KEY) is None


def test_percentage_rounds_half_up():
    assert compute_percentage(1, 8) == 13
    assert compute_percentage(7, 10) == 70
    assert compute_percentage(2, 3) == 67
    assert compute_percentage(0, 10) == 0
    assert compute_percentage(10, 10) == 100


def test_malformed_storage_raises_persistence_error(clock):
    ledger = HighScoreLedger(InMemoryStore({HIGH_SCORES_KEY: [{"score": "x"}]}), clock=clock)

    with pytest.raises(PersistenceError):
        ledger.all_entries()


def test_store_failure_propagates(clock):
    ledger = HighScoreLedger(BrokenStore(), clock=clock)

    with pytest.raises(PersistenceError):
        ledger.record(1, 10, "easy")


def test_utc_z_suffix_timestamps_are_accepted(clock):
    stored = [
        {"score": 6, "totalQuestions": 10, "percentage": 60, "difficulty": "easy", "timestamp": "2025-06-01T09:30:00.000Z"},
        {"score": 6, "totalQuestions": 10, "percentage": 60, "difficulty": "easy", "timestamp": "2025-06-02T09:30:00.000Z"},
    ]
    ledger = HighScoreLedger(InMemoryStore({HIGH_SCORES_KEY: stored}), clock=clock)

    assert ledger.best_for("easy").timestamp == "2025-06-01T09:30:00.000Z"
    assert [entry.timestamp for entry in ledger.all_entries()] == [
        "2025-06-02T09:30:00.000Z",
        "2025-06-01T09:30:00.000Z",
    ]
