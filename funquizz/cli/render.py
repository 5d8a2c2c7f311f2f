"""
Rich rendering for the quiz CLI.

Panels for questions, answer results, repository summaries and errors.
"""

from __future__ import annotations

from collections import Counter

from rich import box
from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from funquizz.core.errors import QuizError
from funquizz.questions import Question, ScoringVariant
from funquizz.repository import Repository
from funquizz.study import AnswerResult, QuizSession

# =============================================================================
# Theme
# =============================================================================

QUIZ_THEME = {
    "primary": "#00BFFF",  # Deep Sky Blue - question borders
    "success": "#00FF88",  # Neon Green - correct answers
    "warning": "#FFD700",  # Gold - skips, recoverable errors
    "error": "#FF3366",  # Red - incorrect answers, fatal errors
    "dim": "#7A8A99",  # Gray - secondary text
}

STYLES = {
    "primary": Style(color=QUIZ_THEME["primary"], bold=True),
    "success": Style(color=QUIZ_THEME["success"], bold=True),
    "warning": Style(color=QUIZ_THEME["warning"], bold=True),
    "error": Style(color=QUIZ_THEME["error"], bold=True),
    "dim": Style(color=QUIZ_THEME["dim"]),
}

VARIANT_LABELS = {
    ScoringVariant.SINGLE: "Single Choice",
    ScoringVariant.NEGATIVE_SINGLE: "Negative Score Single Choice",
    ScoringVariant.SKIPPABLE_NEGATIVE_SINGLE: "Skippable Negative Score Single Choice",
    ScoringVariant.MULTIPLE: "Multiple Choice",
    ScoringVariant.NEGATIVE_MULTIPLE: "Negative Score Multiple Choice",
}


def question_panel(question: Question, number: int) -> Panel:
    """Question text with its numbered answers."""
    header = Text()
    header.append(f"[{VARIANT_LABELS[question.variant].upper()}]", style=STYLES["primary"])
    header.append(f" #{number}", style=STYLES["dim"])

    table = Table(box=box.MINIMAL, show_header=False)
    table.add_column("Index", style="cyan", justify="right", width=4)
    table.add_column("Answer", style="white")
    for i, answer in enumerate(question.answers, start=1):
        table.add_row(f"[{i}]", answer.text)

    if question.single_choice:
        hint = "Pick one answer"
    else:
        hint = "Pick any number of answers (e.g. 1 3)"
    if question.variant.skippable:
        hint += ", blank to skip"

    return Panel(
        Group(Align.left(Text(question.text)), table, Text(hint, style=STYLES["dim"])),
        title=header,
        title_align="left",
        border_style=Style(color=QUIZ_THEME["primary"]),
        box=box.HEAVY,
        padding=(1, 2),
    )


def result_panel(result: AnswerResult, session: QuizSession) -> Panel:
    """Score for one answer, the correct answers and the explanation."""
    if result.perfect:
        color, status = QUIZ_THEME["success"], "CORRECT"
    elif result.skipped:
        color, status = QUIZ_THEME["warning"], "SKIPPED"
    else:
        color, status = QUIZ_THEME["error"], "INCORRECT"

    content = Text()
    content.append(f"{status}  {result.score:+.2f}\n\n", style=Style(color=color, bold=True))
    for i, answer in enumerate(result.question.answers, start=1):
        marker = ">" if i - 1 in result.selected else " "
        style = STYLES["success"] if answer.is_correct else STYLES["dim"]
        content.append(f"{marker} [{i}] {answer.text}\n", style=style)
    content.append("\nExplanation: ", style=STYLES["warning"])
    content.append(result.explanation)
    content.append(
        f"\n\nScore: {session.total_score:g}/{session.answered} ({session.percentage}%)",
        style=STYLES["dim"],
    )

    return Panel(content, border_style=Style(color=color), box=box.HEAVY, padding=(1, 2))


def repository_table(repository: Repository) -> Table:
    """Summary of a repository: strategy and question counts per variant."""
    table = Table(title=str(repository.path or "Repository"))
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Strategy", repository.repository_type.value)
    table.add_row("Total questions", str(repository.question_count))

    counts = Counter(q.variant for q in repository.questions)
    for variant in ScoringVariant:
        if counts[variant]:
            table.add_row(VARIANT_LABELS[variant], str(counts[variant]))
    return table


def question_list_table(repository: Repository) -> Table:
    table = Table(box=box.SIMPLE)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Question", style="white")
    table.add_column("Type", style="dim")
    table.add_column("Answers", justify="right")
    for i, question in enumerate(repository.questions, start=1):
        table.add_row(str(i), question.text, question.variant.value, str(len(question.answers)))
    return table


def error_panel(exc: QuizError) -> Panel:
    color = QUIZ_THEME["warning"] if exc.recoverable else QUIZ_THEME["error"]
    title = "Hold up!" if exc.recoverable else "Error"
    return Panel(
        Text(str(exc)),
        title=title,
        border_style=Style(color=color),
        box=box.HEAVY,
    )
