"""Service that hands a completed attempt over to the results view."""

from __future__ import annotations

import logging

from trivia_quiz.constants.storage_constants import LATEST_RESULT_KEY
from trivia_quiz.core.errors import PersistenceError
from trivia_quiz.core.models import QuizResultSnapshot
from trivia_quiz.core.storage import KeyValueStore

logger = logging.getLogger(__name__)

_SCORE_MESSAGES: tuple[tuple[int, str], ...] = (
    (90, "Outstanding! You're a quiz master!"),
    (80, "Excellent work! You really know your stuff!"),
    (70, "Great job! You did very well!"),
    (60, "Good effort! Keep practicing!"),
    (50, "Not bad! There's room for improvement!"),
)
_FALLBACK_SCORE_MESSAGE = "Keep studying and try again!"


def score_message(percentage: float) -> str:
    for threshold, message in _SCORE_MESSAGES:
        if percentage >= threshold:
            return message
    return _FALLBACK_SCORE_MESSAGE


def score_band(percentage: float) -> str:
    """Return ``"high"``, ``"medium"`` or ``"low"`` for colouring a score."""
    if percentage >= 80:
        return "high"
    if percentage >= 60:
        return "medium"
    return "low"


class ResultHandoff:
    """Keeps the latest completed attempt for the results view.

    The snapshot is also written to the store so it survives a restart. Store
    failures are logged and the in-memory copy is still served.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store
        self._latest: QuizResultSnapshot | None = None

    def publish(self, snapshot: QuizResultSnapshot) -> QuizResultSnapshot:
        self._latest = snapshot
        try:
            self._store.write(LATEST_RESULT_KEY, snapshot.to_dict())
        except PersistenceError as exc:
            logger.warning("Could not persist the latest quiz result: %s", exc)
        return snapshot

    def latest(self) -> QuizResultSnapshot | None:
        if self._latest is not None:
            return self._latest
        try:
            raw = self._store.read(LATEST_RESULT_KEY)
        except PersistenceError as exc:
            logger.warning("Could not read the latest quiz result: %s", exc)
            return None
        if raw is None:
            return None
        try:
            self._latest = QuizResultSnapshot.from_dict(raw)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Ignoring malformed stored quiz result: %s", exc)
            return None
        return self._latest
