"""Service for recording attempt results and answering best-score queries."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

from trivia_quiz.constants.quiz_constants import HIGH_SCORE_DISPLAY_LIMIT
from trivia_quiz.constants.storage_constants import HIGH_SCORES_KEY
from trivia_quiz.core.errors import PersistenceError
from trivia_quiz.core.models import Difficulty, HighScoreEntry, compute_percentage
from trivia_quiz.core.storage import KeyValueStore


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _timestamp_key(entry: HighScoreEntry) -> datetime:
    timestamp = entry.timestamp
    if timestamp.endswith("Z"):
        timestamp = timestamp[:-1] + "+00:00"
    parsed = datetime.fromisoformat(timestamp)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class HighScoreLedger:
    """Append-only leaderboard persisted through a ``KeyValueStore``.

    Entries are stored unordered; ordering is applied on read.
    """

    def __init__(self, store: KeyValueStore, clock: Callable[[], datetime] = _utc_now) -> None:
        self._store = store
        self._clock = clock

    def record(self, score: int, total: int, difficulty: Difficulty | str) -> HighScoreEntry:
        entries = self._load_entries()
        entry = self._make_entry(score, total, Difficulty.parse(difficulty))
        self._save_entries([*entries, entry])
        return entry

    def commit_attempt(
        self, score: int, total: int, difficulty: Difficulty | str
    ) -> tuple[HighScoreEntry, bool]:
        """Decide whether the attempt is a new best, then record it.

        Both steps use the same read of the store, so the verdict always
        reflects the ledger as it was before this attempt.
        """
        level = Difficulty.parse(difficulty)
        entries = self._load_entries()
        entry = self._make_entry(score, total, level)
        is_new_best = self._beats_all(entries, entry.percentage, level)
        self._save_entries([*entries, entry])
        return entry, is_new_best

    def best_for(self, difficulty: Difficulty | str) -> HighScoreEntry | None:
        level = Difficulty.parse(difficulty)
        matching = [entry for entry in self._load_entries() if entry.difficulty is level]
        if not matching:
            return None
        # min() keeps the first of equal keys, so storage order breaks exact ties.
        return min(matching, key=lambda entry: (-entry.percentage, _timestamp_key(entry)))

    def is_new_best(self, score: int, total: int, difficulty: Difficulty | str) -> bool:
        level = Difficulty.parse(difficulty)
        return self._beats_all(self._load_entries(), compute_percentage(score, total), level)

    def all_entries(self) -> list[HighScoreEntry]:
        return sorted(
            self._load_entries(),
            key=lambda entry: (entry.percentage, _timestamp_key(entry)),
            reverse=True,
        )

    def top_entries(self, limit: int = HIGH_SCORE_DISPLAY_LIMIT) -> list[HighScoreEntry]:
        return self.all_entries()[: max(0, limit)]

    @staticmethod
    def _beats_all(entries: list[HighScoreEntry], percentage: int, difficulty: Difficulty) -> bool:
        return not any(
            entry.difficulty is difficulty and entry.percentage >= percentage for entry in entries
        )

    def _make_entry(self, score: int, total: int, difficulty: Difficulty) -> HighScoreEntry:
        return HighScoreEntry(
            score=score,
            total_questions=total,
            percentage=compute_percentage(score, total),
            difficulty=difficulty,
            timestamp=self._clock().isoformat(),
        )

    def _load_entries(self) -> list[HighScoreEntry]:
        raw_entries = self._store.read(HIGH_SCORES_KEY, [])
        if raw_entries is None:
            return []
        if not isinstance(raw_entries, list):
            raise PersistenceError("Stored high scores must be a list.")
        try:
            entries = [HighScoreEntry.from_dict(item) for item in raw_entries]
            for entry in entries:
                _timestamp_key(entry)
        except (KeyError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Stored high scores are malformed: {exc}") from exc
        return entries

    def _save_entries(self, entries: list[HighScoreEntry]) -> None:
        self._store.write(HIGH_SCORES_KEY, [entry.to_dict() for entry in entries])
