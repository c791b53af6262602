"""Locations and keys for the locally persisted quiz data."""

from __future__ import annotations

import os
from pathlib import Path

DATA_DIR: Path = Path(
    os.environ.get("TRIVIA_QUIZ_DATA_DIR", str(Path.home() / ".trivia_quiz"))
)
STORE_FILENAME: str = "trivia_quiz_store.json"

HIGH_SCORES_KEY: str = "highScores"
LATEST_RESULT_KEY: str = "quizResults"
