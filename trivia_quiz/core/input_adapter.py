"""Translate raw key presses into quiz session actions.

The adapter is stateless: callers pass in what it needs to know about the
current question and get back an action (or ``None``) to forward to the
quiz manager.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class QuizActionKind(Enum):
    SELECT_OPTION = auto()
    SUBMIT = auto()
    PREVIOUS = auto()


@dataclass(frozen=True, slots=True)
class QuizAction:
    kind: QuizActionKind
    option_index: int | None = None


_SUBMIT_KEYS = {"Enter", "Return"}
_PREVIOUS_KEYS = {"ArrowLeft", "Left"}


def map_key_to_action(
    key: str,
    *,
    option_count: int,
    current_index: int,
    has_selection: bool,
    input_blocked: bool = False,
) -> QuizAction | None:
    """Map a key name to a quiz action.

    Digits 1-4 select an option, Enter submits once something is selected and
    the left arrow goes back when there is a previous question.
    """
    if input_blocked:
        return None

    if len(key) == 1 and "1" <= key <= "4":
        option_index = int(key) - 1
        if option_index < option_count:
            return QuizAction(QuizActionKind.SELECT_OPTION, option_index)
        return None

    if key in _SUBMIT_KEYS:
        return QuizAction(QuizActionKind.SUBMIT) if has_selection else None

    if key in _PREVIOUS_KEYS:
        return QuizAction(QuizActionKind.PREVIOUS) if current_index > 0 else None

    return None
