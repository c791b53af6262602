"""Settings dialog for configuring quiz preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from trivia_quiz.constants.quiz_constants import MAX_QUESTION_COUNT


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        game_font_size: int = 14,
        question_count: int = 10,
        high_score_limit: int = 5,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(360)

        self._game_font_size = game_font_size
        self._question_count = max(1, min(MAX_QUESTION_COUNT, question_count))
        self._high_score_limit = max(1, min(10, high_score_limit))

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        quiz_group = QGroupBox("Quiz")
        quiz_layout = QVBoxLayout()
        quiz_group.setLayout(quiz_layout)

        self.question_count_spinbox = self._add_spin_row(
            quiz_layout, "Questions per quiz:", 1, MAX_QUESTION_COUNT, self._question_count
        )
        self.high_score_spinbox = self._add_spin_row(
            quiz_layout, "High scores shown:", 1, 10, self._high_score_limit
        )
        layout.addWidget(quiz_group)

        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)
        self.game_font_spinbox = self._add_spin_row(
            display_layout, "Question font size:", 10, 36, self._game_font_size, suffix=" pt"
        )
        layout.addWidget(display_group)

        button_row = QHBoxLayout()
        button_row.addStretch()
        ok_button = QPushButton("OK")
        ok_button.clicked.connect(self.accept)
        cancel_button = QPushButton("Cancel")
        cancel_button.clicked.connect(self.reject)
        button_row.addWidget(ok_button)
        button_row.addWidget(cancel_button)
        layout.addLayout(button_row)

    @staticmethod
    def _add_spin_row(
        layout: QVBoxLayout, label: str, minimum: int, maximum: int, value: int, suffix: str = ""
    ) -> QSpinBox:
        row = QHBoxLayout()
        row.addWidget(QLabel(label))
        spinbox = QSpinBox()
        spinbox.setRange(minimum, maximum)
        spinbox.setValue(value)
        if suffix:
            spinbox.setSuffix(suffix)
        row.addWidget(spinbox)
        layout.addLayout(row)
        return spinbox

    def get_game_font_size(self) -> int:
        return self.game_font_spinbox.value()

    def get_question_count(self) -> int:
        return self.question_count_spinbox.value()

    def get_high_score_limit(self) -> int:
        return self.high_score_spinbox.value()
