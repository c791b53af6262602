"""Service that turns raw provider records into a validated question set."""

from __future__ import annotations

import logging
from typing import Protocol

from trivia_quiz.constants.quiz_constants import DEFAULT_QUESTION_COUNT, OPTIONS_PER_QUESTION
from trivia_quiz.core.errors import FetchError, PreconditionError
from trivia_quiz.core.models import Difficulty, Question

logger = logging.getLogger(__name__)


class QuestionProvider(Protocol):
    """Anything able to fetch raw question records for a difficulty."""

    def fetch_questions(self, difficulty: Difficulty, count: int) -> list[dict[str, object]]:
        ...


class QuestionLoader:
    """Fetches questions once and keeps only the records that are playable."""

    def __init__(self, provider: QuestionProvider) -> None:
        self._provider = provider

    def load(self, difficulty: Difficulty | str, count: int = DEFAULT_QUESTION_COUNT) -> list[Question]:
        """Return up to ``count`` validated questions.

        Fewer questions than requested is accepted. Raises ``FetchError`` when
        the provider fails or nothing valid comes back.
        """
        level = Difficulty.parse(difficulty)
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise PreconditionError("Question count must be a positive integer.")

        try:
            raw_records = self._provider.fetch_questions(level, count)
        except Exception as exc:
            logger.warning("Question provider failed: %s", exc)
            raise FetchError(f"Could not load {level.value} questions: {exc}") from exc

        questions: list[Question] = []
        for record in raw_records:
            if len(questions) == count:
                break
            try:
                questions.append(self._prepare_question(record, level, question_id=len(questions) + 1))
            except ValueError as exc:
                logger.debug("Dropping invalid question record: %s", exc)

        if not questions:
            raise FetchError(f"No valid {level.value} questions were returned.")
        if len(questions) < count:
            logger.warning("Requested %d questions but only %d were usable.", count, len(questions))
        return questions

    def _prepare_question(self, record: dict, difficulty: Difficulty, question_id: int) -> Question:
        """Validate and normalize a raw record into a ``Question``."""
        if not isinstance(record, dict):
            raise ValueError("Question record must be a mapping.")
        text = str(record.get("text") or "").strip()
        if not text:
            raise ValueError("Question text must not be empty.")

        options = self._validate_options(record.get("options"))
        correct_index = record.get("correct_option_index")
        if isinstance(correct_index, bool) or not isinstance(correct_index, int):
            raise ValueError("Correct option index must be an integer.")
        if not 0 <= correct_index < OPTIONS_PER_QUESTION:
            raise ValueError("Correct option index must be between 0 and 3.")

        return Question(
            id=question_id,
            text=text,
            options=options,
            correct_option_index=correct_index,
            category=str(record.get("category") or "General").strip(),
            difficulty=difficulty,
        )

    @staticmethod
    def _validate_options(options: object) -> tuple[str, ...]:
        if not isinstance(options, (list, tuple)) or len(options) != OPTIONS_PER_QUESTION:
            raise ValueError("Each question must have exactly four options.")
        cleaned = tuple(str(option).strip() for option in options)
        if any(not option for option in cleaned):
            raise ValueError("Option text cannot be empty.")
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("Options must be distinct.")
        return cleaned
