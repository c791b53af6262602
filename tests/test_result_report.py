from __future__ import annotations

from conftest import make_question
from trivia_quiz.core.markdown_renderer import escape_markdown, renderer
from trivia_quiz.core.models import Difficulty, HighScoreEntry, Question, QuizResultSnapshot
from trivia_quiz.core.result_report import build_leaderboard_markdown, build_results_markdown


def make_snapshot() -> QuizResultSnapshot:
    tricky = Question(
        id=2,
        text="Which tag is <b>bold</b> in *HTML*?",
        options=("<b>", "<i>", "<u>", "<s>"),
        correct_option_index=0,
        category="Computers",
        difficulty=Difficulty.MEDIUM,
    )
    return QuizResultSnapshot(
        questions=(make_question(1, correct=0), tricky),
        selected_answers=(0, None),
        score=1,
        difficulty=Difficulty.MEDIUM,
        is_new_high_score=True,
    )


def test_results_report_lists_each_question():
    markdown = build_results_markdown(make_snapshot())

    assert "# 1/2" in markdown
    assert "50% Correct" in markdown
    assert "New High Score!" in markdown
    assert "**Correct**" in markdown
    assert "**Not answered**" in markdown
    assert "- No answer selected" in markdown


def test_results_report_without_summary():
    markdown = build_results_markdown(make_snapshot(), include_summary=False)

    assert "50% Correct" not in markdown
    assert markdown.startswith("## Question Review")


def test_third_party_text_is_not_rendered_as_markup():
    html = renderer.render_fragment(build_results_markdown(make_snapshot()))

    assert "<b>bold</b>" not in html
    assert "&lt;b&gt;bold&lt;/b&gt;" in html
    assert "<em>HTML</em>" not in html


def test_escape_markdown():
    assert escape_markdown("*a* [b]") == "\\*a\\* \\[b\\]"


def test_leaderboard_markdown():
    entry = HighScoreEntry(
        score=8, total_questions=10, percentage=80, difficulty=Difficulty.HARD, timestamp="2026-01-01T12:00:00+00:00"
    )

    table = build_leaderboard_markdown([entry])

    assert "| 1 | 8/10 | 80% | hard | 2026-01-01 |" in table
    assert "No high scores yet" in build_leaderboard_markdown([])
