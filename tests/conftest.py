"""Shared fixtures for the quiz tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from trivia_quiz.core.errors import PersistenceError
from trivia_quiz.core.models import Difficulty, Question
from trivia_quiz.core.quiz_manager import QuizManager
from trivia_quiz.core.services.high_score_ledger import HighScoreLedger
from trivia_quiz.core.services.question_loader import QuestionLoader
from trivia_quiz.core.services.result_handoff import ResultHandoff
from trivia_quiz.core.storage import InMemoryStore


def make_question(question_id: int = 1, correct: int = 0, difficulty: Difficulty = Difficulty.MEDIUM) -> Question:
    return Question(
        id=question_id,
        text=f"Question {question_id}?",
        options=("Alpha", "Beta", "Gamma", "Delta"),
        correct_option_index=correct,
        category="General Knowledge",
        difficulty=difficulty,
    )


def make_record(text: str = "What is 2 + 2?", correct: int = 1, options=None) -> dict[str, object]:
    return {
        "text": text,
        "options": list(options) if options is not None else ["3", "4", "5", "22"],
        "correct_option_index": correct,
        "category": "Mathematics",
        "difficulty": "easy",
    }


class FakeProvider:
    """Question provider returning canned records or raising a canned error."""

    def __init__(self, records=None, error: Exception | None = None) -> None:
        self.records = records if records is not None else []
        self.error = error
        self.calls: list[tuple[Difficulty, int]] = []

    def fetch_questions(self, difficulty: Difficulty, count: int) -> list[dict[str, object]]:
        self.calls.append((difficulty, count))
        if self.error is not None:
            raise self.error
        return list(self.records)


class StepClock:
    """Deterministic clock advancing one minute per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(minutes=1)
        return value


class BrokenStore:
    """Store whose every access fails like an unreadable file."""

    def read(self, key, default=None):
        raise PersistenceError("disk unavailable")

    def write(self, key, value):
        raise PersistenceError("disk unavailable")


@pytest.fixture
def questions() -> list[Question]:
    return [make_question(i, correct=i % 4) for i in range(1, 11)]


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def ledger(store: InMemoryStore, clock: StepClock) -> HighScoreLedger:
    return HighScoreLedger(store, clock=clock)


@pytest.fixture
def provider() -> FakeProvider:
    records = [make_record(f"Question {i}?", correct=i % 4) for i in range(10)]
    return FakeProvider(records)


@pytest.fixture
def quiz_manager(provider: FakeProvider, store: InMemoryStore, ledger: HighScoreLedger) -> QuizManager:
    return QuizManager(
        loader=QuestionLoader(provider),
        ledger=ledger,
        handoff=ResultHandoff(store),
    )
