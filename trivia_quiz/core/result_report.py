"""Build markdown reports for completed attempts and the leaderboard."""

from __future__ import annotations

from trivia_quiz.constants.ui_constants import RESULTS_NEW_HIGH_SCORE
from trivia_quiz.core.markdown_renderer import escape_markdown
from trivia_quiz.core.models import HighScoreEntry, QuizResultSnapshot
from trivia_quiz.core.services.result_handoff import score_message


def build_leaderboard_markdown(entries: list[HighScoreEntry], title: str = "High Scores") -> str:
    lines = [f"## {title}", ""]
    if not entries:
        lines.append("_No high scores yet._")
        return "\n".join(lines)

    lines.append("| # | Score | Percentage | Difficulty | Date |")
    lines.append("|---|---|---|---|---|")
    for rank, entry in enumerate(entries, start=1):
        lines.append(
            f"| {rank} | {entry.score}/{entry.total_questions} | {entry.percentage}% "
            f"| {entry.difficulty.value} | {entry.timestamp[:10]} |"
        )
    return "\n".join(lines)


def build_results_markdown(
    snapshot: QuizResultSnapshot,
    best: HighScoreEntry | None = None,
    high_scores: list[HighScoreEntry] | None = None,
    *,
    include_summary: bool = True,
) -> str:
    """Summary, per-question review and (optionally) the leaderboard."""
    lines: list[str] = []
    if include_summary:
        lines.extend(_summary_lines(snapshot, best))

    lines.extend(["## Question Review", ""])
    for number, review in enumerate(snapshot.reviews(), start=1):
        question = review.question
        if review.is_correct:
            status = "Correct"
        elif review.was_answered:
            status = "Incorrect"
        else:
            status = "Not answered"
        lines.append(f"{number}\\. **{status}** · _{escape_markdown(question.category)}_")
        lines.append("")
        lines.append(escape_markdown(question.text))
        lines.append("")
        if review.was_answered:
            lines.append(f"- Your answer: {escape_markdown(review.selected_option_text or '')}")
        else:
            lines.append("- No answer selected")
        if not review.is_correct:
            lines.append(f"- Correct answer: {escape_markdown(review.correct_option_text)}")
        lines.append("")

    if high_scores:
        lines.append(build_leaderboard_markdown(high_scores))
    return "\n".join(lines)


def _summary_lines(snapshot: QuizResultSnapshot, best: HighScoreEntry | None) -> list[str]:
    lines = [
        f"# {snapshot.score}/{snapshot.total_questions}",
        "",
        f"**{snapshot.percentage}% Correct** · {snapshot.difficulty.value.upper()} DIFFICULTY",
        "",
        score_message(snapshot.percentage),
        "",
    ]
    if snapshot.is_new_high_score:
        lines.extend([f"**{RESULTS_NEW_HIGH_SCORE}**", ""])
    if best is not None:
        lines.extend([f"Best: {best.percentage}%", ""])
    return lines
