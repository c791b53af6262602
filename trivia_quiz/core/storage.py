"""Keyed record stores used to persist the leaderboard and the latest result.

Each key holds one JSON-compatible value that is always read and written as a
whole unit. The ledger and the result handoff receive a store instance instead
of touching the filesystem directly, so tests can use ``InMemoryStore``.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from threading import Lock
from typing import Any, Protocol

from trivia_quiz.core.errors import PersistenceError


class KeyValueStore(Protocol):
    """Minimal durable storage contract."""

    def read(self, key: str, default: Any = None) -> Any:
        ...

    def write(self, key: str, value: Any) -> None:
        ...


class InMemoryStore:
    """Process-local store with the same semantics as ``JsonFileStore``."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def read(self, key: str, default: Any = None) -> Any:
        if key not in self._data:
            return default
        return copy.deepcopy(self._data[key])

    def write(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)


class JsonFileStore:
    """Stores every key in a single JSON document on disk."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)
        self._lock = Lock()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def read(self, key: str, default: Any = None) -> Any:
        with self._lock:
            document = self._load_document()
        return document.get(key, default)

    def write(self, key: str, value: Any) -> None:
        with self._lock:
            document = self._load_document()
            document[key] = value
            self._save_document(document)

    def _load_document(self) -> dict[str, Any]:
        if not self._file_path.exists():
            return {}
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Could not read {self._file_path}: {exc}") from exc
        if not text.strip():
            return {}
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PersistenceError(f"{self._file_path} is not valid JSON: {exc}") from exc
        if not isinstance(document, dict):
            raise PersistenceError(f"{self._file_path} must contain a JSON object.")
        return document

    def _save_document(self, document: dict[str, Any]) -> None:
        temp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
            os.replace(temp_path, self._file_path)
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Could not write {self._file_path}: {exc}") from exc
