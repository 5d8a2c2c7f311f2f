"""
Typer CLI for FunQuizz.

Commands:
    funquizz play PATH            - Answer questions from a repository
    funquizz new PATH             - Create an empty repository
    funquizz info PATH            - Show strategy and question counts
    funquizz list PATH            - List the questions of a repository
    funquizz add PATH ...         - Add a question to a repository
    funquizz remove PATH N...     - Remove questions by their listed number

Usage:
    funquizz --help
    funquizz new quizzes/networking --type intelligent
    funquizz add quizzes/networking.json -t "Which layer routes packets?" \\
        -a Physical -a Network -a Transport -c 2 --type single
    funquizz play quizzes/networking.json --limit 10
"""

from __future__ import annotations

import random
import re
import sys
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from loguru import logger
from rich.console import Console
from rich.prompt import Prompt

from config import get_settings
from funquizz.cli import render
from funquizz.core.errors import EmptyPoolError, InvalidSelectionError, QuizError
from funquizz.questions import Answer, ScoringVariant, question_from_parameters
from funquizz.repository import (
    Repository,
    RepositoryType,
    create_repository,
    load_repository,
    save_repository,
)
from funquizz.study import QuizSession

app = typer.Typer(
    name="funquizz",
    help="FunQuizz - quiz repositories with adaptive question selection",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

QUIT_INPUTS = {"q", "quit", "exit"}


# =============================================================================
# Helpers
# =============================================================================


def configure_logging(level: str) -> None:
    """Route loguru output to stderr at the given level."""
    settings = get_settings()
    logger.remove()
    logger.add(sys.stderr, level=level, format=settings.log_format)


def make_rng(seed: int | None) -> random.Random:
    """Seeded RNG when a seed is given (or configured), OS entropy otherwise."""
    if seed is None:
        seed = get_settings().rng_seed
    return random.Random(seed)


def parse_selection(raw: str) -> list[int]:
    """
    Parse typed answer numbers ("1 3", "2,4") into 0-based positions.

    Raises:
        InvalidSelectionError: input is not a list of numbers
    """
    parts = [p for p in re.split(r"[\s,]+", raw.strip()) if p]
    if not all(p.isdigit() for p in parts):
        raise InvalidSelectionError("Enter answer numbers separated by spaces, e.g. 1 3")
    return [int(p) - 1 for p in parts]


def _fail(exc: QuizError) -> NoReturn:
    console.print(render.error_panel(exc))
    raise typer.Exit(code=1)


def _resolve_path(path: Path | None) -> Path:
    if path is not None:
        return path
    configured = get_settings().repository_path
    if configured is None:
        console.print("[red]No repository given. Pass PATH or set FUNQUIZZ_REPOSITORY_PATH.[/]")
        raise typer.Exit(code=2)
    return configured


def _load(path: Path | None, seed: int | None = None) -> Repository:
    try:
        return load_repository(_resolve_path(path), rng=make_rng(seed))
    except QuizError as exc:
        _fail(exc)


def _save(repository: Repository) -> None:
    try:
        saved = save_repository(repository, indent=get_settings().json_indent)
    except QuizError as exc:
        _fail(exc)
    console.print(f"[green]Saved {repository.question_count} questions to {saved}[/]")


PathArg = Annotated[
    Path | None, typer.Argument(help="Repository JSON file (defaults to FUNQUIZZ_REPOSITORY_PATH)")
]


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
) -> None:
    """
    FunQuizz quiz runner.

    Load a repository of questions and answer them one at a time; the
    repository's strategy decides which question comes next.
    """
    configure_logging("DEBUG" if verbose else get_settings().log_level)


# =============================================================================
# Quiz Commands
# =============================================================================


@app.command()
def play(
    path: PathArg = None,
    limit: Annotated[
        int | None, typer.Option("--limit", "-n", help="Stop after N answered questions")
    ] = None,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Seed for reproducible shuffles and draws")
    ] = None,
) -> None:
    """
    Answer questions from a repository.

    Type answer numbers separated by spaces, leave blank to skip, 'q' to quit.
    """
    repository = _load(path, seed)
    session = QuizSession(repository)
    console.print(render.repository_table(repository))

    while limit is None or session.answered < limit:
        try:
            question = session.draw()
        except EmptyPoolError as exc:
            console.print(render.error_panel(exc))
            break

        console.print(render.question_panel(question, session.answered + 1))
        result = None
        while result is None:
            raw = Prompt.ask("[bold cyan]Answer[/]", default="", show_default=False)
            if raw.strip().lower() in QUIT_INPUTS:
                break
            try:
                result = session.answer(parse_selection(raw))
            except InvalidSelectionError as exc:
                console.print(render.error_panel(exc))

        if result is None:
            break
        console.print(render.result_panel(result, session))

    console.print(
        f"[bold]Final score: {session.total_score:g}/{session.answered} "
        f"({session.percentage}%)[/]"
    )


# =============================================================================
# Repository Commands
# =============================================================================


@app.command()
def new(
    path: Annotated[Path, typer.Argument(help="File to create (.json appended if missing)")],
    repository_type: Annotated[
        RepositoryType | None, typer.Option("--type", "-t", help="Selection strategy")
    ] = None,
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite an existing file")] = False,
) -> None:
    """Create an empty repository."""
    settings = get_settings()
    try:
        repository = create_repository(
            path,
            repository_type or settings.default_repository_type,
            overwrite=force,
            indent=settings.json_indent,
        )
    except QuizError as exc:
        _fail(exc)
    console.print(
        f"[green]Created {repository.repository_type.value} repository at {repository.path}[/]"
    )


@app.command()
def info(path: PathArg = None) -> None:
    """Show strategy and question counts of a repository."""
    console.print(render.repository_table(_load(path)))


@app.command("list")
def list_questions(path: PathArg = None) -> None:
    """List the questions of a repository."""
    repository = _load(path)
    if not repository.question_count:
        console.print("[yellow]Repository has no questions.[/]")
        return
    console.print(render.question_list_table(repository))


@app.command()
def add(
    path: Annotated[Path, typer.Argument(help="Repository JSON file")],
    text: Annotated[str, typer.Option("--text", "-t", help="Question text")],
    answers: Annotated[
        list[str], typer.Option("--answer", "-a", help="Answer text (repeat for each answer)")
    ],
    correct: Annotated[
        list[int] | None,
        typer.Option("--correct", "-c", help="Number of a correct answer (repeatable)"),
    ] = None,
    variant: Annotated[
        ScoringVariant, typer.Option("--type", help="Scoring variant")
    ] = ScoringVariant.SINGLE,
    explanation: Annotated[
        str | None, typer.Option("--explanation", "-e", help="Shown after answering")
    ] = None,
) -> None:
    """Add a question to a repository."""
    repository = _load(path)
    correct_numbers = set(correct or [])
    try:
        question = question_from_parameters(
            text,
            [Answer(a, i in correct_numbers) for i, a in enumerate(answers, start=1)],
            explanation,
            variant,
            rng=repository.rng,
        )
        repository.add_question(question)
    except QuizError as exc:
        _fail(exc)
    _save(repository)


@app.command()
def remove(
    path: Annotated[Path, typer.Argument(help="Repository JSON file")],
    numbers: Annotated[list[int], typer.Argument(help="Question numbers as shown by 'list'")],
) -> None:
    """Remove questions by their listed number."""
    repository = _load(path)
    questions = repository.questions
    invalid = [n for n in numbers if not 1 <= n <= len(questions)]
    if invalid:
        console.print(f"[red]No question numbered {', '.join(map(str, invalid))}[/]")
        raise typer.Exit(code=1)

    keep = [q for i, q in enumerate(questions, start=1) if i not in set(numbers)]
    dropped = repository.set_questions(keep)
    for question in dropped:
        console.print(f"[dim]Removed: {question.text}[/]")
    _save(repository)


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
