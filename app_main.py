"""Application entry point for Trivia Quiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from trivia_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from trivia_quiz.constants.storage_constants import DATA_DIR, STORE_FILENAME
from trivia_quiz.core.quiz_manager import QuizManager
from trivia_quiz.core.services.high_score_ledger import HighScoreLedger
from trivia_quiz.core.services.question_loader import QuestionLoader
from trivia_quiz.core.services.result_handoff import ResultHandoff
from trivia_quiz.core.storage import JsonFileStore
from trivia_quiz.core.trivia_client import OpenTriviaClient
from trivia_quiz.server.api_server import start_api_server
from trivia_quiz.ui.quiz_main_window import QuizMainWindow
from trivia_quiz.utils.logging_config import configure_logging


def build_quiz_manager() -> QuizManager:
    """Wire the quiz services to the on-disk store and the trivia provider."""
    store = JsonFileStore(DATA_DIR / STORE_FILENAME)
    return QuizManager(
        loader=QuestionLoader(OpenTriviaClient()),
        ledger=HighScoreLedger(store),
        handoff=ResultHandoff(store),
    )


def main() -> None:
    """Initialize logging, start the API server, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting Trivia Quiz…")

    quiz_manager = build_quiz_manager()
    start_api_server(quiz_manager=quiz_manager, host=DEFAULT_HOST, port=DEFAULT_PORT)
    logger.info("Leaderboard available at http://%s:%d/", DEFAULT_HOST, DEFAULT_PORT)

    app = QApplication(sys.argv)
    window = QuizMainWindow(quiz_manager=quiz_manager)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
