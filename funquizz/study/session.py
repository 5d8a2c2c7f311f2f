"""
Quiz session: one sitting in front of a repository.

Tracks the question currently awaiting an answer and the running score,
the way the quiz window shows "score / answered" and a percentage bar.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from loguru import logger

from funquizz.questions import Answer, Question
from funquizz.repository import Repository


@dataclass
class AnswerResult:
    """Result of answering one question."""
    question: Question
    selected: list[int]
    score: float

    @property
    def skipped(self) -> bool:
        return not self.selected

    @property
    def perfect(self) -> bool:
        return self.score >= 1.0

    @property
    def correct_answers(self) -> list[Answer]:
        return self.question.correct_answers

    @property
    def explanation(self) -> str:
        return self.question.explanation


@dataclass
class QuizSession:
    """Running quiz over a repository."""

    repository: Repository
    total_score: float = 0.0
    answered: int = 0
    history: list[AnswerResult] = field(default_factory=list)
    current: Question | None = None

    @property
    def percentage(self) -> int:
        """Score as a whole percentage of questions answered."""
        if not self.answered:
            return 0
        return int(self.total_score * 100 / self.answered)

    @property
    def awaiting_answer(self) -> bool:
        return self.current is not None

    def draw(self) -> Question:
        """
        Present the next question.

        Raises:
            EmptyPoolError: repository has no questions
        """
        self.current = self.repository.next()
        return self.current

    def answer(self, selected: Iterable[int]) -> AnswerResult:
        """
        Submit the answer positions for the current question.

        An empty selection is a skip; whether that is allowed depends on
        the question's scoring variant.

        Raises:
            RuntimeError: no question is awaiting an answer
            InvalidSelectionError: selection rejected; the same question
                stays current so the user can correct it
        """
        if self.current is None:
            raise RuntimeError("No question is awaiting an answer")
        positions = list(selected)
        score = self.repository.score_and_feedback(self.current, positions)

        result = AnswerResult(question=self.current, selected=positions, score=score)
        self.history.append(result)
        self.total_score += score
        self.answered += 1
        self.current = None
        logger.debug(f"Answered {result.question.text!r}: {score:+.2f}")
        return result

    def reset(self) -> None:
        """Clear the tally, e.g. after the pool was edited."""
        self.total_score = 0.0
        self.answered = 0
        self.history.clear()
        self.current = None
