from __future__ import annotations

from threading import Barrier, Thread

import pytest

from conftest import BrokenStore, FakeProvider, make_record
from trivia_quiz.core.errors import FetchError, PreconditionError
from trivia_quiz.core.models import Difficulty
from trivia_quiz.core.quiz_manager import QuizManager
from trivia_quiz.core.services.high_score_ledger import HighScoreLedger
from trivia_quiz.core.services.question_loader import QuestionLoader
from trivia_quiz.core.services.result_handoff import ResultHandoff


def answer_all(manager: QuizManager, correct: int):
    """Answer every question, the first ``correct`` of them correctly."""
    snapshot = None
    position = 0
    while snapshot is None:
        progress = manager.get_progress()
        question = progress.question
        choice = question.correct_option_index
        if position >= correct:
            choice = (choice + 1) % len(question.options)
        manager.select_option(choice)
        snapshot = manager.submit_answer(progress.current_index)
        position += 1
    return snapshot


def test_start_quiz_loads_configured_count(quiz_manager, provider):
    progress = quiz_manager.start_quiz("easy")

    assert provider.calls == [(Difficulty.EASY, 10)]
    assert progress.current_index == 0
    assert progress.question_count == 10
    assert progress.time_remaining_seconds == 30
    assert not progress.can_go_back
    assert quiz_manager.has_active_quiz()


def test_fetch_failure_leaves_no_active_quiz(store, ledger):
    manager = QuizManager(
        loader=QuestionLoader(FakeProvider(error=ConnectionError("offline"))),
        ledger=ledger,
        handoff=ResultHandoff(store),
    )

    with pytest.raises(FetchError):
        manager.start_quiz("medium")
    assert not manager.has_active_quiz()
    assert manager.tick() is None


def test_completed_attempt_is_recorded_and_handed_off(quiz_manager):
    quiz_manager.start_quiz("hard")

    snapshot = answer_all(quiz_manager, correct=7)

    assert snapshot.score == 7
    assert snapshot.difficulty is Difficulty.HARD
    assert snapshot.is_new_high_score is True
    assert len(snapshot.selected_answers) == 10
    assert quiz_manager.get_latest_result() == snapshot
    assert quiz_manager.get_best_score("hard").percentage == 70
    assert not quiz_manager.has_active_quiz()


def test_matching_previous_best_is_not_a_new_high_score(quiz_manager):
    quiz_manager.start_quiz("medium")
    answer_all(quiz_manager, correct=6)

    quiz_manager.start_quiz("medium")
    snapshot = answer_all(quiz_manager, correct=6)

    assert snapshot.is_new_high_score is False
    assert len(quiz_manager.get_high_scores(limit=10)) == 2


def test_timeout_on_last_question_scores_remaining_correct(quiz_manager):
    quiz_manager.start_quiz("easy")
    for _ in range(9):
        progress = quiz_manager.get_progress()
        quiz_manager.select_option(progress.question.correct_option_index)
        quiz_manager.submit_answer(progress.current_index)

    snapshot = None
    for _ in range(30):
        snapshot = quiz_manager.tick()

    assert snapshot is not None
    assert snapshot.score == 9
    assert snapshot.selected_answers[9] is None


def test_ticks_after_completion_or_abandon_are_noops(quiz_manager):
    quiz_manager.start_quiz("easy")
    answer_all(quiz_manager, correct=10)
    assert quiz_manager.tick() is None

    quiz_manager.start_quiz("easy")
    quiz_manager.abandon_quiz()
    assert quiz_manager.tick() is None
    assert quiz_manager.get_progress() is None


def test_double_submit_for_same_question_advances_once(quiz_manager):
    quiz_manager.start_quiz("easy")
    quiz_manager.select_option(0)

    quiz_manager.submit_answer(0)
    with pytest.raises(PreconditionError):
        quiz_manager.submit_answer(0)

    assert quiz_manager.get_progress().current_index == 1


def test_racing_timer_and_click_advance_once(quiz_manager):
    quiz_manager.start_quiz("easy")
    barrier = Barrier(2)
    outcomes: list[str] = []

    def submit() -> None:
        barrier.wait()
        try:
            quiz_manager.submit_answer(0)
            outcomes.append("advanced")
        except PreconditionError:
            outcomes.append("rejected")

    threads = [Thread(target=submit) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(outcomes) == ["advanced", "rejected"]
    assert quiz_manager.get_progress().current_index == 1


def test_previous_at_first_question_is_rejected(quiz_manager):
    quiz_manager.start_quiz("easy")
    quiz_manager.select_option(2)
    before = quiz_manager.get_progress()

    with pytest.raises(PreconditionError):
        quiz_manager.go_to_previous()
    assert quiz_manager.get_progress() == before


def test_operations_without_quiz_are_rejected(quiz_manager):
    with pytest.raises(PreconditionError):
        quiz_manager.select_option(0)
    with pytest.raises(PreconditionError):
        quiz_manager.submit_answer()


def test_persistence_failure_still_completes_attempt():
    manager = QuizManager(
        loader=QuestionLoader(FakeProvider([make_record(f"Q{i}?") for i in range(3)])),
        ledger=HighScoreLedger(BrokenStore()),
        handoff=ResultHandoff(BrokenStore()),
    )
    manager.start_quiz("easy")

    snapshot = answer_all(manager, correct=3)

    assert snapshot.score == 3
    assert snapshot.is_new_high_score is False
    assert manager.get_latest_result() == snapshot
    assert manager.get_high_scores() == []
    assert manager.get_best_score("easy") is None


def test_high_scores_filter_by_difficulty(quiz_manager):
    quiz_manager.start_quiz("easy")
    answer_all(quiz_manager, correct=5)
    quiz_manager.start_quiz("hard")
    answer_all(quiz_manager, correct=8)

    hard_scores = quiz_manager.get_high_scores(difficulty="hard")
    assert [entry.score for entry in hard_scores] == [8]
    assert [entry.score for entry in quiz_manager.get_high_scores()] == [8, 5]


def test_question_count_setting(quiz_manager, provider):
    quiz_manager.set_question_count(5)
    progress = quiz_manager.start_quiz("medium")

    assert provider.calls[-1] == (Difficulty.MEDIUM, 5)
    assert progress.question_count == 5
    with pytest.raises(PreconditionError):
        quiz_manager.set_question_count(0)
