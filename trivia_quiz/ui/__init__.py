"""Qt UI components for the quiz application."""

from .dialog_helpers import (
    confirm_leave_quiz,
    show_info,
    show_warning,
)
from .quiz_main_window import QuizMainWindow

__all__ = [
    "QuizMainWindow",
    "confirm_leave_quiz",
    "show_info",
    "show_warning",
]
