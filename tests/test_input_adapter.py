from __future__ import annotations

import pytest

from trivia_quiz.core.input_adapter import QuizAction, QuizActionKind, map_key_to_action


def action_for(key: str, **overrides) -> QuizAction | None:
    options = {"option_count": 4, "current_index": 1, "has_selection": True, "input_blocked": False}
    options.update(overrides)
    return map_key_to_action(key, **options)


@pytest.mark.parametrize("key, index", [("1", 0), ("2", 1), ("3", 2), ("4", 3)])
def test_digits_select_options(key, index):
    assert action_for(key) == QuizAction(QuizActionKind.SELECT_OPTION, index)


def test_digit_beyond_option_count_is_ignored():
    assert action_for("4", option_count=3) is None
    assert action_for("5") is None
    assert action_for("0") is None


def test_enter_submits_only_with_selection():
    assert action_for("Enter") == QuizAction(QuizActionKind.SUBMIT)
    assert action_for("Return") == QuizAction(QuizActionKind.SUBMIT)
    assert action_for("Enter", has_selection=False) is None


def test_left_arrow_goes_back_only_after_first_question():
    assert action_for("ArrowLeft") == QuizAction(QuizActionKind.PREVIOUS)
    assert action_for("ArrowLeft", current_index=0) is None


def test_blocked_input_maps_to_nothing():
    assert action_for("1", input_blocked=True) is None
    assert action_for("Enter", input_blocked=True) is None


def test_unmapped_keys_are_ignored():
    assert action_for("a") is None
    assert action_for("") is None
    assert action_for("ArrowRight") is None
