"""Component that runs a quiz attempt: question, options, timer and navigation."""

from __future__ import annotations

from collections.abc import Callable
import logging

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_quiz.constants.quiz_constants import OPTIONS_PER_QUESTION
from trivia_quiz.constants.ui_constants import (
    QUIZ_EXIT_BUTTON,
    QUIZ_FINISH_BUTTON,
    QUIZ_PREVIOUS_BUTTON,
    QUIZ_PROGRESS_TEMPLATE,
    QUIZ_SUBMIT_BUTTON,
    QUIZ_TIMER_TEMPLATE,
    TIMER_INTERVAL_MS,
)
from trivia_quiz.core.errors import PreconditionError
from trivia_quiz.core.input_adapter import QuizActionKind, map_key_to_action
from trivia_quiz.core.models import QuizResultSnapshot
from trivia_quiz.core.quiz_manager import QuizManager, QuizProgress
from trivia_quiz.styling.styles import Styles

logger = logging.getLogger(__name__)

_KEY_NAMES = {
    Qt.Key_Return: "Enter",
    Qt.Key_Enter: "Enter",
    Qt.Key_Left: "ArrowLeft",
}


class QuizPanel(QWidget):
    """UI component driving the quiz manager for a single attempt."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_complete: Callable[[QuizResultSnapshot], None],
        on_exit: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_complete = on_complete
        self.on_exit = on_exit
        self._progress: QuizProgress | None = None

        self._build_ui()
        self._configure_countdown_timer()
        self.setFocusPolicy(Qt.StrongFocus)

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.position_label = QLabel("", self)
        header_row.addWidget(self.position_label)
        self.category_label = QLabel("", self)
        header_row.addWidget(self.category_label, stretch=1)
        self.timer_label = QLabel("", self)
        self.timer_label.setStyleSheet(Styles.get_timer_style(running_low=False))
        header_row.addWidget(self.timer_label)
        layout.addLayout(header_row)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.question_label = QLabel("", self)
        self.question_label.setWordWrap(True)
        self.question_label.setTextFormat(Qt.PlainText)
        layout.addWidget(self.question_label)

        self.option_group = QButtonGroup(self)
        self.option_group.setExclusive(True)
        self.option_buttons: list[QPushButton] = []
        for index in range(OPTIONS_PER_QUESTION):
            button = QPushButton("", self)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, i=index: self._handle_option_click(i))
            self.option_group.addButton(button, index)
            self.option_buttons.append(button)
            layout.addWidget(button)

        nav_row = QHBoxLayout()
        self.previous_button = QPushButton(QUIZ_PREVIOUS_BUTTON, self)
        self.previous_button.clicked.connect(self._handle_previous_click)
        nav_row.addWidget(self.previous_button)

        self.exit_button = QPushButton(QUIZ_EXIT_BUTTON, self)
        self.exit_button.clicked.connect(self._handle_exit_click)
        nav_row.addWidget(self.exit_button)

        nav_row.addStretch()
        self.submit_button = QPushButton(QUIZ_SUBMIT_BUTTON, self)
        self.submit_button.clicked.connect(self._handle_submit_click)
        nav_row.addWidget(self.submit_button)
        layout.addLayout(nav_row)
        layout.addStretch()

    def _configure_countdown_timer(self) -> None:
        self.countdown_timer = QTimer(self)
        self.countdown_timer.setInterval(TIMER_INTERVAL_MS)
        self.countdown_timer.timeout.connect(self._handle_tick)

    # --- Lifecycle ---

    def begin(self, progress: QuizProgress) -> None:
        """Show the first question and start the countdown."""
        self._render(progress)
        self.countdown_timer.start()
        self.setFocus()

    def stop(self) -> None:
        """Stop the countdown; called on completion and whenever the page is left."""
        if self.countdown_timer.isActive():
            self.countdown_timer.stop()
        self._progress = None

    def pause(self) -> None:
        """Hold the countdown while a modal dialog is open."""
        if self.countdown_timer.isActive():
            self.countdown_timer.stop()

    def resume(self) -> None:
        if self._progress is not None and self.quiz_manager.has_active_quiz():
            self.countdown_timer.start()

    # --- Input handlers ---

    def _handle_tick(self) -> None:
        snapshot = self.quiz_manager.tick()
        if snapshot is not None:
            self._finish(snapshot)
            return
        progress = self.quiz_manager.get_progress()
        if progress is None:
            self.stop()
            return
        self._render(progress)

    def _handle_option_click(self, index: int) -> None:
        self._apply(lambda: self.quiz_manager.select_option(index))

    def _handle_previous_click(self) -> None:
        self._apply(self.quiz_manager.go_to_previous)

    def _handle_submit_click(self) -> None:
        if self._progress is None:
            return
        displayed_index = self._progress.current_index
        try:
            snapshot = self.quiz_manager.submit_answer(displayed_index)
        except PreconditionError as exc:
            logger.debug("Ignored submit: %s", exc)
            self._refresh()
            return
        if snapshot is not None:
            self._finish(snapshot)
        else:
            self._refresh()

    def _handle_exit_click(self) -> None:
        self.on_exit()

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802 - Qt override
        progress = self._progress
        key_name = _KEY_NAMES.get(event.key(), event.text())
        action = None
        if progress is not None:
            action = map_key_to_action(
                key_name,
                option_count=len(progress.question.options),
                current_index=progress.current_index,
                has_selection=progress.tentative_choice is not None,
                input_blocked=self.quiz_manager.is_input_blocked(),
            )
        if action is None:
            super().keyPressEvent(event)
            return

        if action.kind is QuizActionKind.SELECT_OPTION:
            self._handle_option_click(action.option_index)
        elif action.kind is QuizActionKind.SUBMIT:
            self._handle_submit_click()
        elif action.kind is QuizActionKind.PREVIOUS:
            self._handle_previous_click()
        event.accept()

    # --- Rendering ---

    def _apply(self, transition: Callable[[], QuizProgress]) -> None:
        try:
            progress = transition()
        except PreconditionError as exc:
            logger.debug("Ignored quiz input: %s", exc)
            self._refresh()
            return
        self._render(progress)

    def _refresh(self) -> None:
        progress = self.quiz_manager.get_progress()
        if progress is not None:
            self._render(progress)

    def _finish(self, snapshot: QuizResultSnapshot) -> None:
        self.stop()
        self.on_complete(snapshot)

    def _render(self, progress: QuizProgress) -> None:
        self._progress = progress
        question = progress.question
        self.position_label.setText(
            QUIZ_PROGRESS_TEMPLATE.format(number=progress.current_index + 1, total=progress.question_count)
        )
        self.category_label.setText(question.category)
        self.timer_label.setText(QUIZ_TIMER_TEMPLATE.format(seconds=progress.time_remaining_seconds))
        self.timer_label.setStyleSheet(Styles.get_timer_style(running_low=progress.is_time_running_low))
        self.progress_bar.setValue(int(progress.progress_percentage))
        self.question_label.setText(question.text)

        self.option_group.setExclusive(False)
        for index, button in enumerate(self.option_buttons):
            visible = index < len(question.options)
            button.setVisible(visible)
            if visible:
                button.setText(f"{index + 1}. {question.options[index]}")
            button.setChecked(progress.tentative_choice == index)
        self.option_group.setExclusive(True)

        self.previous_button.setEnabled(progress.can_go_back)
        self.submit_button.setEnabled(progress.tentative_choice is not None)
        self.submit_button.setText(QUIZ_FINISH_BUTTON if progress.is_last_question else QUIZ_SUBMIT_BUTTON)

    def apply_font_size(self, font_size: int) -> None:
        self.question_label.setStyleSheet(f"font-size: {font_size + 4}pt; font-weight: bold;")
        for button in self.option_buttons:
            button.setStyleSheet(f"font-size: {font_size}pt; text-align: left;")
