"""FastAPI server exposing results and the leaderboard to web clients."""

from __future__ import annotations

from threading import Thread

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
import uvicorn

from trivia_quiz.constants.about import APP_NAME, APP_VERSION
from trivia_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from trivia_quiz.constants.quiz_constants import DIFFICULTY_DESCRIPTORS, HIGH_SCORE_DISPLAY_LIMIT
from trivia_quiz.core.errors import PreconditionError
from trivia_quiz.core.markdown_renderer import renderer
from trivia_quiz.core.models import Difficulty, HighScoreEntry, QuizResultSnapshot
from trivia_quiz.core.quiz_manager import QuizManager
from trivia_quiz.core.result_report import build_leaderboard_markdown
from trivia_quiz.core.services.result_handoff import score_message


class DifficultyPayload(BaseModel):
    """Descriptor of a selectable difficulty."""

    level: str
    label: str
    description: str


class HighScorePayload(BaseModel):
    """Leaderboard row."""

    score: int
    total_questions: int
    percentage: int
    difficulty: str
    timestamp: str


class QuestionPayload(BaseModel):
    id: int
    text: str
    options: list[str]
    correct_option_index: int
    category: str
    difficulty: str


class ResultPayload(BaseModel):
    """Snapshot of the latest completed attempt."""

    questions: list[QuestionPayload]
    selected_answers: list[int | None]
    score: int
    total_questions: int
    percentage: int
    difficulty: str
    is_new_high_score: bool
    message: str


def _entry_payload(entry: HighScoreEntry) -> HighScorePayload:
    return HighScorePayload(
        score=entry.score,
        total_questions=entry.total_questions,
        percentage=entry.percentage,
        difficulty=entry.difficulty.value,
        timestamp=entry.timestamp,
    )


def _result_payload(snapshot: QuizResultSnapshot) -> ResultPayload:
    return ResultPayload(
        questions=[
            QuestionPayload(
                id=question.id,
                text=question.text,
                options=list(question.options),
                correct_option_index=question.correct_option_index,
                category=question.category,
                difficulty=question.difficulty.value,
            )
            for question in snapshot.questions
        ],
        selected_answers=list(snapshot.selected_answers),
        score=snapshot.score,
        total_questions=snapshot.total_questions,
        percentage=snapshot.percentage,
        difficulty=snapshot.difficulty.value,
        is_new_high_score=snapshot.is_new_high_score,
        message=score_message(snapshot.percentage),
    )


def _parse_difficulty(value: str) -> Difficulty:
    try:
        return Difficulty.parse(value)
    except PreconditionError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def create_api_app(quiz_manager: QuizManager) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager)

    @app.get("/", response_class=HTMLResponse)
    def serve_leaderboard_page(manager: QuizManager = Depends(quiz_manager_dep)) -> str:
        entries = manager.get_high_scores(limit=HIGH_SCORE_DISPLAY_LIMIT)
        markdown = f"# {APP_NAME}\n\n" + build_leaderboard_markdown(entries)
        return renderer.render_full_document(markdown, title=APP_NAME)

    @app.get("/difficulties")
    def list_difficulties() -> list[DifficultyPayload]:
        return [
            DifficultyPayload(level=level, label=label, description=description)
            for level, label, description in DIFFICULTY_DESCRIPTORS
        ]

    @app.get("/results/latest")
    def get_latest_result(manager: QuizManager = Depends(quiz_manager_dep)) -> ResultPayload:
        snapshot = manager.get_latest_result()
        if snapshot is None:
            raise HTTPException(status_code=404, detail="No completed quiz attempt.")
        return _result_payload(snapshot)

    @app.get("/high-scores")
    def get_high_scores(
        limit: int = Query(HIGH_SCORE_DISPLAY_LIMIT, ge=1, le=100),
        difficulty: str | None = None,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> list[HighScorePayload]:
        level = _parse_difficulty(difficulty) if difficulty is not None else None
        return [_entry_payload(entry) for entry in manager.get_high_scores(limit=limit, difficulty=level)]

    @app.get("/high-scores/{difficulty}/best")
    def get_best_score(
        difficulty: str,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> HighScorePayload:
        best = manager.get_best_score(_parse_difficulty(difficulty))
        if best is None:
            raise HTTPException(status_code=404, detail=f"No high score for {difficulty} yet.")
        return _entry_payload(best)

    return app


def start_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(quiz_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="QuizApiServer", daemon=True)
    thread.start()
    return thread
