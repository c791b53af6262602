"""Component showing the outcome of a completed attempt."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from trivia_quiz.constants.quiz_constants import HIGH_SCORE_DISPLAY_LIMIT
from trivia_quiz.constants.ui_constants import (
    HOME_BEST_SCORE_TEMPLATE,
    RESULTS_DIFFICULTY_TEMPLATE,
    RESULTS_EMPTY_MESSAGE,
    RESULTS_HOME_BUTTON,
    RESULTS_NEW_HIGH_SCORE,
    RESULTS_PERCENTAGE_TEMPLATE,
    RESULTS_RETAKE_BUTTON,
    RESULTS_SCORE_TEMPLATE,
    RESULTS_TITLE,
)
from trivia_quiz.core.markdown_renderer import renderer
from trivia_quiz.core.models import Difficulty, QuizResultSnapshot
from trivia_quiz.core.quiz_manager import QuizManager
from trivia_quiz.core.result_report import build_results_markdown
from trivia_quiz.core.services.result_handoff import score_band, score_message
from trivia_quiz.styling.styles import Styles


class ResultsPanel(QWidget):
    """Score summary, question review and leaderboard for the last attempt."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_retake: Callable[[Difficulty], None],
        on_home: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_retake = on_retake
        self.on_home = on_home
        self._snapshot: QuizResultSnapshot | None = None
        self._high_score_limit = HIGH_SCORE_DISPLAY_LIMIT

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(RESULTS_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_headline_style())
        layout.addWidget(self.title_label)

        self.new_high_score_label = QLabel(RESULTS_NEW_HIGH_SCORE, self)
        self.new_high_score_label.setAlignment(Qt.AlignCenter)
        self.new_high_score_label.setStyleSheet(Styles.get_badge_style())
        layout.addWidget(self.new_high_score_label, alignment=Qt.AlignCenter)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.summary_label = QLabel("", self)
        self.summary_label.setAlignment(Qt.AlignCenter)
        self.summary_label.setWordWrap(True)
        layout.addWidget(self.summary_label)

        self.report_view = QTextBrowser(self)
        self.report_view.setOpenExternalLinks(False)
        layout.addWidget(self.report_view, stretch=1)

        button_row = QHBoxLayout()
        self.retake_button = QPushButton(RESULTS_RETAKE_BUTTON, self)
        self.retake_button.clicked.connect(self._handle_retake_click)
        button_row.addWidget(self.retake_button)
        self.home_button = QPushButton(RESULTS_HOME_BUTTON, self)
        self.home_button.clicked.connect(self.on_home)
        button_row.addWidget(self.home_button)
        layout.addLayout(button_row)

    def set_high_score_limit(self, limit: int) -> None:
        self._high_score_limit = max(1, limit)

    def show_latest_result(self) -> None:
        """Render the latest snapshot, or the empty state when there is none."""
        snapshot = self.quiz_manager.get_latest_result()
        if snapshot is None:
            self._show_empty()
        else:
            self._show_snapshot(snapshot)

    def _show_snapshot(self, snapshot: QuizResultSnapshot) -> None:
        self._snapshot = snapshot
        percentage = snapshot.percentage
        self.title_label.setText(RESULTS_TITLE)
        self.new_high_score_label.setVisible(snapshot.is_new_high_score)
        self.score_label.setVisible(True)
        self.score_label.setText(
            RESULTS_SCORE_TEMPLATE.format(score=snapshot.score, total=snapshot.total_questions)
        )
        self.score_label.setStyleSheet(Styles.get_score_style(score_band(percentage)))
        best = self.quiz_manager.get_best_score(snapshot.difficulty)
        summary = [
            RESULTS_PERCENTAGE_TEMPLATE.format(percentage=percentage),
            RESULTS_DIFFICULTY_TEMPLATE.format(difficulty=snapshot.difficulty.value.upper()),
            score_message(percentage),
        ]
        if best is not None:
            summary.append(HOME_BEST_SCORE_TEMPLATE.format(percentage=best.percentage))
        self.summary_label.setText("\n".join(summary))

        high_scores = self.quiz_manager.get_high_scores(limit=self._high_score_limit)
        markdown = build_results_markdown(snapshot, high_scores=high_scores, include_summary=False)
        self.report_view.setHtml(renderer.render_full_document(markdown, title=RESULTS_TITLE))
        self.report_view.setVisible(True)
        self.retake_button.setEnabled(True)

    def _show_empty(self) -> None:
        self._snapshot = None
        self.title_label.setText(RESULTS_EMPTY_MESSAGE)
        self.new_high_score_label.setVisible(False)
        self.score_label.setVisible(False)
        self.summary_label.setText("")
        self.report_view.clear()
        self.report_view.setVisible(False)
        self.retake_button.setEnabled(False)

    def _handle_retake_click(self) -> None:
        if self._snapshot is not None:
            self.on_retake(self._snapshot.difficulty)

    def apply_font_size(self, font_size: int) -> None:
        self.summary_label.setStyleSheet(f"font-size: {font_size}pt;")
        self.report_view.setStyleSheet(f"font-size: {font_size}pt;")
