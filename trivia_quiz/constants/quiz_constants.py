"""Quiz-related constants shared across UI and core layers."""

from __future__ import annotations

DEFAULT_QUESTION_COUNT: int = 10
MAX_QUESTION_COUNT: int = 50
QUESTION_TIME_LIMIT_SECONDS: int = 30
TIME_RUNNING_LOW_SECONDS: int = 10
OPTIONS_PER_QUESTION: int = 4
HIGH_SCORE_DISPLAY_LIMIT: int = 5
DEFAULT_DIFFICULTY: str = "medium"

# (level, label, description)
DIFFICULTY_DESCRIPTORS: tuple[tuple[str, str, str], ...] = (
    ("easy", "Easy", "Perfect for beginners and casual learners"),
    ("medium", "Medium", "A balanced challenge for regular quiz takers"),
    ("hard", "Hard", "For experts who want to test their limits"),
)
