"""Component for choosing a difficulty and starting a quiz."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_quiz.constants.quiz_constants import DEFAULT_DIFFICULTY, DIFFICULTY_DESCRIPTORS
from trivia_quiz.constants.ui_constants import (
    HOME_BEST_SCORE_TEMPLATE,
    HOME_HEADLINE,
    HOME_NO_BEST_SCORE,
    HOME_START_BUTTON,
    HOME_SUBTITLE,
)
from trivia_quiz.core.models import Difficulty
from trivia_quiz.core.quiz_manager import QuizManager
from trivia_quiz.styling.styles import Styles


class HomePanel(QWidget):
    """Difficulty picker with the best score achieved at each level."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_start_quiz: Callable[[Difficulty], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_start_quiz = on_start_quiz
        self._selected = Difficulty.parse(DEFAULT_DIFFICULTY)
        self._best_labels: dict[Difficulty, QLabel] = {}
        self._difficulty_buttons: dict[Difficulty, QPushButton] = {}

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        headline = QLabel(HOME_HEADLINE, self)
        headline.setAlignment(Qt.AlignCenter)
        headline.setStyleSheet(Styles.get_headline_style())
        layout.addWidget(headline)

        subtitle = QLabel(HOME_SUBTITLE, self)
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setWordWrap(True)
        layout.addWidget(subtitle)

        self.difficulty_group = QButtonGroup(self)
        self.difficulty_group.setExclusive(True)
        cards_row = QHBoxLayout()
        for level, label, description in DIFFICULTY_DESCRIPTORS:
            difficulty = Difficulty.parse(level)
            card = QVBoxLayout()

            button = QPushButton(f"{label}\n{description}", self)
            button.setCheckable(True)
            button.setChecked(difficulty is self._selected)
            button.clicked.connect(lambda _checked=False, d=difficulty: self._select_difficulty(d))
            self.difficulty_group.addButton(button)
            self._difficulty_buttons[difficulty] = button
            card.addWidget(button)

            best_label = QLabel(HOME_NO_BEST_SCORE, self)
            best_label.setAlignment(Qt.AlignCenter)
            self._best_labels[difficulty] = best_label
            card.addWidget(best_label)

            cards_row.addLayout(card)
        layout.addLayout(cards_row)

        self.start_button = QPushButton(HOME_START_BUTTON, self)
        self.start_button.clicked.connect(self._handle_start_click)
        layout.addWidget(self.start_button)
        layout.addStretch()

    def _select_difficulty(self, difficulty: Difficulty) -> None:
        self._selected = difficulty

    def _handle_start_click(self) -> None:
        self.on_start_quiz(self._selected)

    def selected_difficulty(self) -> Difficulty:
        return self._selected

    def refresh_best_scores(self) -> None:
        for difficulty, label in self._best_labels.items():
            best = self.quiz_manager.get_best_score(difficulty)
            if best is None:
                label.setText(HOME_NO_BEST_SCORE)
            else:
                label.setText(HOME_BEST_SCORE_TEMPLATE.format(percentage=best.percentage))

    def apply_font_size(self, font_size: int) -> None:
        for button in self._difficulty_buttons.values():
            button.setStyleSheet(f"font-size: {font_size}pt;")
        self.start_button.setStyleSheet(f"font-size: {font_size}pt; font-weight: bold;")
