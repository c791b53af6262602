"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math

from trivia_quiz.core.errors import PreconditionError


class Difficulty(str, Enum):
    """Question set difficulty offered by the trivia provider."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: "Difficulty | str") -> "Difficulty":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise PreconditionError(
                f"Unknown difficulty '{value}'. Expected one of: easy, medium, hard."
            ) from exc


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice trivia question with exactly four options."""

    id: int
    text: str
    options: tuple[str, ...]
    correct_option_index: int
    category: str
    difficulty: Difficulty

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "text": self.text,
            "options": list(self.options),
            "correct_option_index": self.correct_option_index,
            "category": self.category,
            "difficulty": self.difficulty.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Question":
        options = tuple(str(option) for option in data["options"])
        correct_option_index = int(data["correct_option_index"])
        if not 0 <= correct_option_index < len(options):
            raise ValueError(f"Correct option index {correct_option_index} is out of range.")
        return cls(
            id=int(data["id"]),
            text=str(data["text"]),
            options=options,
            correct_option_index=correct_option_index,
            category=str(data["category"]),
            difficulty=Difficulty.parse(data["difficulty"]),
        )


def compute_percentage(score: int, total: int) -> int:
    """Return ``100 * score / total`` rounded half-up to an integer."""
    if total <= 0:
        raise PreconditionError("Total number of questions must be positive.")
    return int(math.floor(100 * score / total + 0.5))


@dataclass(frozen=True, slots=True)
class HighScoreEntry:
    """Single leaderboard row persisted by the high-score ledger."""

    score: int
    total_questions: int
    percentage: int
    difficulty: Difficulty
    timestamp: str  # ISO-8601, UTC

    def to_dict(self) -> dict[str, object]:
        return {
            "score": self.score,
            "totalQuestions": self.total_questions,
            "percentage": self.percentage,
            "difficulty": self.difficulty.value,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HighScoreEntry":
        return cls(
            score=int(data["score"]),
            total_questions=int(data["totalQuestions"]),
            percentage=int(data["percentage"]),
            difficulty=Difficulty.parse(data["difficulty"]),
            timestamp=str(data["timestamp"]),
        )


@dataclass(frozen=True, slots=True)
class AnswerReview:
    """How one question of a finished attempt was answered."""

    question: Question
    selected_option_index: int | None

    @property
    def was_answered(self) -> bool:
        return self.selected_option_index is not None

    @property
    def is_correct(self) -> bool:
        return self.selected_option_index == self.question.correct_option_index

    @property
    def selected_option_text(self) -> str | None:
        if self.selected_option_index is None:
            return None
        return self.question.options[self.selected_option_index]

    @property
    def correct_option_text(self) -> str:
        return self.question.options[self.question.correct_option_index]


@dataclass(frozen=True, slots=True)
class QuizResultSnapshot:
    """Read-only package of a completed attempt handed to the results view."""

    questions: tuple[Question, ...]
    selected_answers: tuple[int | None, ...]
    score: int
    difficulty: Difficulty
    is_new_high_score: bool

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def percentage(self) -> int:
        return compute_percentage(self.score, self.total_questions)

    def reviews(self) -> list[AnswerReview]:
        return [
            AnswerReview(question=question, selected_option_index=answer)
            for question, answer in zip(self.questions, self.selected_answers)
        ]

    def to_dict(self) -> dict[str, object]:
        return {
            "questions": [question.to_dict() for question in self.questions],
            "answers": list(self.selected_answers),
            "score": self.score,
            "difficulty": self.difficulty.value,
            "isNewHighScore": self.is_new_high_score,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "QuizResultSnapshot":
        questions = tuple(Question.from_dict(item) for item in data["questions"])
        answers = tuple(None if answer is None else int(answer) for answer in data["answers"])
        if not questions:
            raise ValueError("Stored result has no questions.")
        if len(answers) != len(questions):
            raise ValueError("Stored answers do not match the stored questions.")
        for question, answer in zip(questions, answers):
            if answer is not None and not 0 <= answer < len(question.options):
                raise ValueError(f"Stored answer {answer} is out of range for question {question.id}.")
        score = int(data["score"])
        if not 0 <= score <= len(questions):
            raise ValueError(f"Stored score {score} is out of range.")
        return cls(
            questions=questions,
            selected_answers=answers,
            score=score,
            difficulty=Difficulty.parse(data["difficulty"]),
            is_new_high_score=bool(data.get("isNewHighScore", False)),
        )
