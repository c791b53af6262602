"""Qt main window navigating between the home, quiz and results pages."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from trivia_quiz.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from trivia_quiz.constants.quiz_constants import HIGH_SCORE_DISPLAY_LIMIT
from trivia_quiz.constants.ui_constants import (
    NO_QUESTIONS_MESSAGE,
    NO_QUESTIONS_TITLE,
    WINDOW_TITLE,
)
from trivia_quiz.core.errors import FetchError
from trivia_quiz.core.models import Difficulty, QuizResultSnapshot
from trivia_quiz.core.quiz_manager import QuizManager
from trivia_quiz.styling.styles import Styles
from trivia_quiz.ui.components.home_panel import HomePanel
from trivia_quiz.ui.components.quiz_panel import QuizPanel
from trivia_quiz.ui.components.results_panel import ResultsPanel
from trivia_quiz.ui.dialog_helpers import confirm_leave_quiz, show_info, show_warning
from trivia_quiz.ui.settings_dialog import SettingsDialog


class QuizScreen(Enum):
    """Top-level page shown by the main window."""

    HOME = auto()
    QUIZ = auto()
    RESULTS = auto()


class QuizMainWindow(QMainWindow):
    """Main Qt window routing between the three quiz screens."""

    def __init__(self, quiz_manager: QuizManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.quiz_manager = quiz_manager

        self._screen = QuizScreen.HOME
        self._game_font_size: int = 14
        self._high_score_limit: int = HIGH_SCORE_DISPLAY_LIMIT

        self._build_ui()
        self._apply_styles()
        self._show_home()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_menu_buttons(root_layout)

        self.screen_stack = QStackedWidget(self)
        self.home_panel = HomePanel(self.quiz_manager, on_start_quiz=self._start_quiz, parent=self)
        self.quiz_panel = QuizPanel(
            self.quiz_manager,
            on_complete=self._handle_quiz_complete,
            on_exit=self._handle_exit_quiz,
            parent=self,
        )
        self.results_panel = ResultsPanel(
            self.quiz_manager,
            on_retake=self._start_quiz,
            on_home=self._show_home,
            parent=self,
        )
        self.screen_stack.addWidget(self.home_panel)
        self.screen_stack.addWidget(self.quiz_panel)
        self.screen_stack.addWidget(self.results_panel)
        root_layout.addWidget(self.screen_stack)

    def _build_menu_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _set_screen(self, screen: QuizScreen) -> None:
        if self._screen == QuizScreen.QUIZ and screen != QuizScreen.QUIZ:
            self.quiz_panel.stop()
        self._screen = screen
        self.settings_button.setEnabled(screen != QuizScreen.QUIZ)

        index_map = {
            QuizScreen.HOME: 0,
            QuizScreen.QUIZ: 1,
            QuizScreen.RESULTS: 2,
        }
        self.screen_stack.setCurrentIndex(index_map[screen])

    # --- Navigation ---

    def _show_home(self) -> None:
        self.quiz_manager.abandon_quiz()
        self.home_panel.refresh_best_scores()
        self._set_screen(QuizScreen.HOME)

    def _start_quiz(self, difficulty: Difficulty) -> None:
        QApplication.setOverrideCursor(Qt.WaitCursor)
        try:
            progress = self.quiz_manager.start_quiz(difficulty)
        except FetchError:
            QApplication.restoreOverrideCursor()
            show_warning(self, NO_QUESTIONS_TITLE, NO_QUESTIONS_MESSAGE)
            self._show_home()
            return
        QApplication.restoreOverrideCursor()
        self._set_screen(QuizScreen.QUIZ)
        self.quiz_panel.begin(progress)

    def _handle_quiz_complete(self, snapshot: QuizResultSnapshot) -> None:
        self._set_screen(QuizScreen.RESULTS)
        self.results_panel.show_latest_result()

    def _handle_exit_quiz(self) -> None:
        self.quiz_panel.pause()
        if confirm_leave_quiz(self):
            self._show_home()
        else:
            self.quiz_panel.resume()

    # --- Menu actions ---

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._game_font_size,
            self.quiz_manager.get_question_count(),
            self._high_score_limit,
        )
        if dialog.exec():
            self._game_font_size = dialog.get_game_font_size()
            self._high_score_limit = dialog.get_high_score_limit()
            self.quiz_manager.set_question_count(dialog.get_question_count())
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())
        self.home_panel.apply_font_size(self._game_font_size)
        self.quiz_panel.apply_font_size(self._game_font_size)
        self.results_panel.apply_font_size(self._game_font_size)
        self.results_panel.set_high_score_limit(self._high_score_limit)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt override
        self.quiz_panel.stop()
        self.quiz_manager.abandon_quiz()
        super().closeEvent(event)
