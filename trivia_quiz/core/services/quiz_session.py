"""State machine for a single timed quiz attempt.

The timer and a manual click both finalize an answer through ``submit()``;
there is no other path that writes into ``selected_answers``. Every operation
validates its preconditions before touching state, so a rejected call leaves
the attempt exactly as it was.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, auto

from trivia_quiz.constants.quiz_constants import (
    QUESTION_TIME_LIMIT_SECONDS,
    TIME_RUNNING_LOW_SECONDS,
)
from trivia_quiz.core.errors import EmptySessionError, PreconditionError
from trivia_quiz.core.models import Question


class SessionState(Enum):
    """Lifecycle of a quiz attempt."""

    LOADING = auto()
    IN_PROGRESS = auto()
    COMPLETE = auto()
    CLOSED = auto()


def compute_score(questions: Sequence[Question], answers: Sequence[int | None]) -> int:
    """Count the answers that match the correct option; absent answers never count."""
    return sum(
        1
        for question, answer in zip(questions, answers)
        if answer is not None and answer == question.correct_option_index
    )


class QuizSession:
    """Owns the question index, timer, tentative choice and recorded answers."""

    def __init__(self, time_limit_seconds: int = QUESTION_TIME_LIMIT_SECONDS) -> None:
        if time_limit_seconds <= 0:
            raise ValueError("Time limit must be a positive integer.")
        self._time_limit_seconds = time_limit_seconds
        self._state = SessionState.LOADING
        self._questions: tuple[Question, ...] = ()
        self._selected_answers: list[int | None] = []
        self._current_index: int = 0
        self._time_remaining: int = time_limit_seconds
        self._tentative_choice: int | None = None
        self._submitting: bool = False
        self._final_score: int | None = None

    # --- Lifecycle ---

    def start(self, questions: Sequence[Question]) -> None:
        if self._state is not SessionState.LOADING:
            raise PreconditionError("Session has already been started.")
        if not questions:
            raise EmptySessionError("Cannot start a quiz without questions.")
        self._questions = tuple(questions)
        self._selected_answers = [None] * len(self._questions)
        self._current_index = 0
        self._time_remaining = self._time_limit_seconds
        self._tentative_choice = None
        self._state = SessionState.IN_PROGRESS

    def close(self) -> None:
        """Tear down an unfinished attempt; a completed one is left as is."""
        if self._state in (SessionState.LOADING, SessionState.IN_PROGRESS):
            self._state = SessionState.CLOSED

    # --- Transitions ---

    def select_option(self, index: int) -> None:
        self._require_accepting_input()
        option_count = len(self.current_question.options)
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < option_count:
            raise PreconditionError(f"Option index {index!r} is out of range.")
        self._tentative_choice = index

    def tick(self) -> None:
        """Advance the countdown by one second, auto-submitting at zero."""
        if self._state is not SessionState.IN_PROGRESS:
            return
        self._time_remaining = max(0, self._time_remaining - 1)
        if self._time_remaining == 0:
            self.submit()

    def submit(self, question_index: int | None = None) -> None:
        """Finalize the tentative choice for the current question.

        ``question_index`` identifies the question the trigger was raised for;
        a trigger that arrives after that question was already finalized is
        rejected instead of advancing a second time. Transitions are serialized
        by the owning manager's lock, so this index check is what stops a timer
        expiry and a click for the same question from both advancing. The
        in-flight flag only rejects re-entrant calls made during the write.
        """
        self._require_accepting_input()
        if question_index is not None and question_index != self._current_index:
            raise PreconditionError(
                f"Question {question_index} was already submitted; current question is {self._current_index}."
            )

        self._submitting = True
        try:
            self._selected_answers[self._current_index] = self._tentative_choice
            if self._current_index == len(self._questions) - 1:
                self._final_score = compute_score(self._questions, self._selected_answers)
                self._state = SessionState.COMPLETE
            else:
                self._current_index += 1
                self._time_remaining = self._time_limit_seconds
                self._tentative_choice = None
        finally:
            self._submitting = False

    def go_to_previous(self) -> None:
        self._require_accepting_input()
        if self._current_index == 0:
            raise PreconditionError("Already at the first question.")
        self._current_index -= 1
        self._time_remaining = self._time_limit_seconds
        self._tentative_choice = self._selected_answers[self._current_index]

    def score(self) -> int:
        if self._state is not SessionState.COMPLETE or self._final_score is None:
            raise PreconditionError("Score is only available once the quiz is complete.")
        return self._final_score

    # --- Read-only view ---

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_complete(self) -> bool:
        return self._state is SessionState.COMPLETE

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def selected_answers(self) -> tuple[int | None, ...]:
        return tuple(self._selected_answers)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_question(self) -> Question:
        if not self._questions:
            raise PreconditionError("Session has no questions loaded.")
        return self._questions[self._current_index]

    @property
    def tentative_choice(self) -> int | None:
        return self._tentative_choice

    @property
    def time_remaining_seconds(self) -> int:
        return self._time_remaining

    @property
    def time_limit_seconds(self) -> int:
        return self._time_limit_seconds

    @property
    def question_count(self) -> int:
        return len(self._questions)

    @property
    def is_last_question(self) -> bool:
        return bool(self._questions) and self._current_index == len(self._questions) - 1

    @property
    def is_time_running_low(self) -> bool:
        return self._time_remaining <= TIME_RUNNING_LOW_SECONDS

    @property
    def progress_percentage(self) -> float:
        if not self._questions:
            return 0.0
        return (self._current_index + 1) / len(self._questions) * 100

    def _require_accepting_input(self) -> None:
        if self._state is SessionState.LOADING:
            raise PreconditionError("Session has not been started.")
        if self._state is SessionState.COMPLETE:
            raise PreconditionError("Quiz is already complete.")
        if self._state is SessionState.CLOSED:
            raise PreconditionError("Session has been closed.")
        if self._submitting:
            raise PreconditionError("An answer is already being submitted.")
