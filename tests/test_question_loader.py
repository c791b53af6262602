from __future__ import annotations

import pytest

from conftest import FakeProvider, make_record
from trivia_quiz.core.errors import FetchError, PreconditionError
from trivia_quiz.core.models import Difficulty
from trivia_quiz.core.services.question_loader import QuestionLoader


def test_load_returns_requested_count_with_sequential_ids():
    provider = FakeProvider([make_record(f"Q{i}?") for i in range(12)])

    questions = QuestionLoader(provider).load("hard", 10)

    assert len(questions) == 10
    assert [question.id for question in questions] == list(range(1, 11))
    assert all(question.difficulty is Difficulty.HARD for question in questions)
    assert provider.calls == [(Difficulty.HARD, 10)]


def test_load_defaults_to_ten_questions():
    provider = FakeProvider([make_record(f"Q{i}?") for i in range(10)])

    QuestionLoader(provider).load(Difficulty.EASY)

    assert provider.calls == [(Difficulty.EASY, 10)]


def test_invalid_records_are_dropped():
    records = [
        make_record("Valid one?"),
        make_record("Three options?", options=["a", "b", "c"]),
        make_record("Duplicate options?", options=["a", "a", "b", "c"]),
        make_record("Bad index?", correct=4),
        make_record("", correct=0),
        make_record("Blank option?", options=["a", " ", "b", "c"]),
        "not a record",
        make_record("Valid two?", correct=3),
    ]

    questions = QuestionLoader(FakeProvider(records)).load("easy", 10)

    assert [question.text for question in questions] == ["Valid one?", "Valid two?"]
    assert [question.id for question in questions] == [1, 2]
    assert questions[1].correct_option_index == 3
    assert questions[0].options == ("3", "4", "5", "22")


def test_fewer_questions_than_requested_is_degraded_success():
    questions = QuestionLoader(FakeProvider([make_record()])).load("medium", 10)

    assert len(questions) == 1


def test_no_valid_records_raises_fetch_error():
    provider = FakeProvider([make_record(options=["a", "b"])])

    with pytest.raises(FetchError):
        QuestionLoader(provider).load("medium", 10)


def test_provider_failure_becomes_fetch_error():
    provider = FakeProvider(error=ConnectionError("offline"))

    with pytest.raises(FetchError) as exc_info:
        QuestionLoader(provider).load("medium", 10)
    assert isinstance(exc_info.value.__cause__, ConnectionError)


@pytest.mark.parametrize("difficulty, count", [("impossible", 10), ("easy", 0), ("easy", -3), ("easy", True)])
def test_invalid_input_is_rejected_before_fetching(difficulty, count):
    provider = FakeProvider([make_record()])

    with pytest.raises(PreconditionError):
        QuestionLoader(provider).load(difficulty, count)
    assert provider.calls == []
