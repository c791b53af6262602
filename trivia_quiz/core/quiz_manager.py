"""Business logic for running a quiz attempt, shared between UI and API."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from threading import Lock

from trivia_quiz.constants.quiz_constants import (
    DEFAULT_QUESTION_COUNT,
    HIGH_SCORE_DISPLAY_LIMIT,
    MAX_QUESTION_COUNT,
    QUESTION_TIME_LIMIT_SECONDS,
)
from trivia_quiz.core.errors import PersistenceError, PreconditionError
from trivia_quiz.core.models import Difficulty, HighScoreEntry, Question, QuizResultSnapshot
from trivia_quiz.core.services.high_score_ledger import HighScoreLedger
from trivia_quiz.core.services.question_loader import QuestionLoader
from trivia_quiz.core.services.quiz_session import QuizSession
from trivia_quiz.core.services.result_handoff import ResultHandoff

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QuizProgress:
    """Immutable view of the running attempt returned to renderers."""

    difficulty: Difficulty
    question: Question
    current_index: int
    question_count: int
    tentative_choice: int | None
    time_remaining_seconds: int
    is_time_running_low: bool
    is_last_question: bool
    progress_percentage: float

    @property
    def can_go_back(self) -> bool:
        return self.current_index > 0


class QuizManager:
    """Facade for quiz services: Loader, Session, Ledger and Handoff.

    Every public method runs under one lock, so timer ticks, key presses and
    API reads never interleave.
    """

    def __init__(
        self,
        loader: QuestionLoader,
        ledger: HighScoreLedger,
        handoff: ResultHandoff,
        *,
        question_count: int = DEFAULT_QUESTION_COUNT,
        time_limit_seconds: int = QUESTION_TIME_LIMIT_SECONDS,
    ) -> None:
        self._lock = Lock()
        self._loader = loader
        self._ledger = ledger
        self._handoff = handoff
        self._question_count = question_count
        self._time_limit_seconds = time_limit_seconds

        self._session: QuizSession | None = None
        self._difficulty: Difficulty | None = None

    # --- Settings ---

    def set_question_count(self, count: int) -> None:
        if not 1 <= count <= MAX_QUESTION_COUNT:
            raise PreconditionError(f"Question count must be between 1 and {MAX_QUESTION_COUNT}.")
        with self._lock:
            self._question_count = count

    def get_question_count(self) -> int:
        with self._lock:
            return self._question_count

    # --- Session lifecycle ---

    def start_quiz(self, difficulty: Difficulty | str) -> QuizProgress:
        """Load a fresh question set and begin a new attempt.

        Raises ``FetchError`` when no questions could be loaded; any attempt
        already running is abandoned either way.
        """
        level = Difficulty.parse(difficulty)
        self.abandon_quiz()
        with self._lock:
            count = self._question_count
        questions = self._loader.load(level, count)

        session = QuizSession(time_limit_seconds=self._time_limit_seconds)
        session.start(questions)
        with self._lock:
            if self._session is not None:
                self._session.close()
            self._session = session
            self._difficulty = level
            logger.info("Started %s quiz with %d questions", level.value, len(questions))
            return self._build_progress()

    def abandon_quiz(self) -> None:
        with self._lock:
            if self._session is not None:
                self._session.close()
                logger.info("Abandoned quiz at question %d", self._session.current_index + 1)
            self._session = None

    def has_active_quiz(self) -> bool:
        with self._lock:
            return self._session is not None

    def get_progress(self) -> QuizProgress | None:
        with self._lock:
            if self._session is None:
                return None
            return self._build_progress()

    def get_difficulty(self) -> Difficulty | None:
        with self._lock:
            return self._difficulty

    def is_input_blocked(self) -> bool:
        with self._lock:
            return self._session is None or self._session.is_submitting

    # --- Transitions ---

    def select_option(self, option_index: int) -> QuizProgress:
        with self._lock:
            session = self._require_session()
            session.select_option(option_index)
            return self._build_progress()

    def submit_answer(self, question_index: int | None = None) -> QuizResultSnapshot | None:
        """Finalize the current answer; returns the snapshot when the quiz completes."""
        with self._lock:
            session = self._require_session()
            session.submit(question_index)
            return self._finish_if_complete(session)

    def tick(self) -> QuizResultSnapshot | None:
        """Advance the per-question timer; a no-op when no attempt is running."""
        with self._lock:
            session = self._session
            if session is None:
                return None
            session.tick()
            return self._finish_if_complete(session)

    def go_to_previous(self) -> QuizProgress:
        with self._lock:
            session = self._require_session()
            session.go_to_previous()
            return self._build_progress()

    # --- Results & leaderboard ---

    def get_latest_result(self) -> QuizResultSnapshot | None:
        with self._lock:
            return self._handoff.latest()

    def get_high_scores(
        self,
        limit: int = HIGH_SCORE_DISPLAY_LIMIT,
        difficulty: Difficulty | str | None = None,
    ) -> list[HighScoreEntry]:
        level = Difficulty.parse(difficulty) if difficulty is not None else None
        with self._lock:
            try:
                entries = self._ledger.all_entries()
            except PersistenceError as exc:
                logger.warning("Could not read high scores: %s", exc)
                return []
        if level is not None:
            entries = [entry for entry in entries if entry.difficulty is level]
        return entries[: max(0, limit)]

    def get_best_score(self, difficulty: Difficulty | str) -> HighScoreEntry | None:
        level = Difficulty.parse(difficulty)
        with self._lock:
            try:
                return self._ledger.best_for(level)
            except PersistenceError as exc:
                logger.warning("Could not read the best %s score: %s", level.value, exc)
                return None

    # --- Internals ---

    def _require_session(self) -> QuizSession:
        if self._session is None:
            raise PreconditionError("No quiz is currently running.")
        return self._session

    def _build_progress(self) -> QuizProgress:
        session = self._require_session()
        assert self._difficulty is not None
        return QuizProgress(
            difficulty=self._difficulty,
            question=session.current_question,
            current_index=session.current_index,
            question_count=session.question_count,
            tentative_choice=session.tentative_choice,
            time_remaining_seconds=session.time_remaining_seconds,
            is_time_running_low=session.is_time_running_low,
            is_last_question=session.is_last_question,
            progress_percentage=session.progress_percentage,
        )

    def _finish_if_complete(self, session: QuizSession) -> QuizResultSnapshot | None:
        if not session.is_complete:
            return None
        assert self._difficulty is not None

        score = session.score()
        total = session.question_count
        try:
            _, is_new_high_score = self._ledger.commit_attempt(score, total, self._difficulty)
        except PersistenceError as exc:
            logger.warning("Could not update high scores, reporting no new record: %s", exc)
            is_new_high_score = False

        snapshot = QuizResultSnapshot(
            questions=session.questions,
            selected_answers=session.selected_answers,
            score=score,
            difficulty=self._difficulty,
            is_new_high_score=is_new_high_score,
        )
        self._handoff.publish(snapshot)
        self._session = None
        logger.info(
            "Completed %s quiz: %d/%d%s",
            self._difficulty.value,
            score,
            total,
            " (new high score)" if is_new_high_score else "",
        )
        return snapshot
