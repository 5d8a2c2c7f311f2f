"""
Repository: a question pool plus the selection strategy that serves it.

The repository is the unit the presentation layer talks to: it hands out
the next question, takes back the score earned on it, and lets the pool
be edited between questions.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from loguru import logger

from funquizz.core.errors import MalformedInputError, QuizError
from funquizz.questions import Question, question_from_dict, question_to_dict
from funquizz.questions.records import RepositoryDocument

from . import strategies
from .pool import Pool
from .strategies import RepositoryType, SelectionState, parse_repository_type


class Repository:
    """
    Question pool with a selection strategy.

    Handles:
    - Drawing the next question (``next``)
    - Strategy feedback from scores (``feedback`` / ``score_and_feedback``)
    - Pool edits (``set_questions``, ``add_question``, ``remove_question``)
    - Conversion to and from the stored document
    """

    def __init__(
        self,
        repository_type: str | RepositoryType,
        questions: Iterable[Question] = (),
        rng: random.Random | None = None,
        path: Path | None = None,
    ):
        self.repository_type = parse_repository_type(repository_type)
        self.rng = rng or random.Random()
        self.path = path
        self.pool = Pool(questions)
        self.state = SelectionState()
        strategies.reset(self.repository_type, self.pool, self.state)

    def __repr__(self) -> str:
        return (
            f"Repository(type={self.repository_type.value!r}, "
            f"questions={len(self.pool)}, path={self.path!r})"
        )

    @property
    def questions(self) -> list[Question]:
        """Owned questions in pool order."""
        return list(self.pool)

    @property
    def question_count(self) -> int:
        return len(self.pool)

    # ========================================
    # Selection
    # ========================================

    def next(self) -> Question:
        """
        Draw the next question according to the strategy.

        Raises:
            EmptyPoolError: if the pool is empty (repository is left intact)
        """
        question_id = strategies.draw(self.repository_type, self.pool, self.state, self.rng)
        return self.pool.get(question_id)

    def feedback(self, question: Question, score: float) -> None:
        """Report the score the user earned on ``question``."""
        if question.id not in self.pool:
            logger.warning(f"Feedback for a question not in this repository: {question.text!r}")
            return
        strategies.feedback(self.repository_type, self.state, question.id, score)

    def score_and_feedback(self, question: Question, selected: Iterable[int]) -> float:
        """
        Score a selection and feed the result back to the strategy.

        Raises:
            InvalidSelectionError: before any state is touched
        """
        score = question.score(selected)
        self.feedback(question, score)
        return score

    # ========================================
    # Pool edits
    # ========================================

    def set_questions(self, questions: Iterable[Question]) -> list[Question]:
        """
        Replace the pool and start a fresh cycle.

        Returns:
            Questions dropped from the pool
        """
        dropped = self.pool.replace(questions)
        strategies.reset(self.repository_type, self.pool, self.state)
        logger.info(f"Pool replaced: {len(self.pool)} questions, {len(dropped)} dropped")
        return dropped

    def add_question(self, question: Question) -> None:
        """
        Append a question to the pool.

        Raises:
            MalformedInputError: if a question with the same text exists
        """
        if self.pool.find_by_text(question.text) is not None:
            raise MalformedInputError("Question with this text already exists")
        self.pool.append(question)
        if self.state.remaining:
            self.state.remaining.add(question.id)
        logger.debug(f"Question added: {question.text!r}")

    def remove_question(self, question_id: str) -> Question:
        """
        Drop a question from the pool and from the selection state.

        Raises:
            KeyError: if the id is not in the pool
        """
        question = self.pool.remove(question_id)
        self.state.discard(question_id)
        logger.debug(f"Question removed: {question.text!r}")
        return question

    # ========================================
    # Document conversion
    # ========================================

    @classmethod
    def from_document(
        cls,
        data: Any,
        rng: random.Random | None = None,
        path: Path | None = None,
    ) -> Repository:
        """
        Build a repository from a decoded document.

        Raises:
            MalformedInputError: missing/mistyped ``type`` or ``questions``
            UnknownVariantError: unknown repository or question type
        """
        if not isinstance(data, dict):
            raise MalformedInputError("Invalid repository format: expected an object")
        tag = data.get("type")
        if not isinstance(tag, str):
            raise MalformedInputError("Invalid repository format: 'type' not found or is not a string")
        repository_type = parse_repository_type(tag)

        records = data.get("questions")
        if not isinstance(records, list):
            raise MalformedInputError(
                "Invalid repository format: 'questions' not found or is not an array"
            )

        rng = rng or random.Random()
        questions = []
        for position, record in enumerate(records, start=1):
            try:
                questions.append(question_from_dict(record, rng))
            except QuizError as exc:
                raise exc.with_context(f"question #{position}") from exc

        return cls(repository_type, questions, rng=rng, path=path)

    def to_document(self) -> dict:
        """Serialize to the stored document form."""
        document = RepositoryDocument(
            type=self.repository_type.value,
            questions=[question_to_dict(q) for q in self.pool],
        )
        return document.model_dump()


# =============================================================================
# Collaborator-facing helpers
# =============================================================================


def next_question(repository: Repository) -> Question:
    return repository.next()


def score_and_feedback(repository: Repository, question: Question, selected: Iterable[int]) -> float:
    return repository.score_and_feedback(question, selected)


def replace_questions(repository: Repository, questions: Iterable[Question]) -> None:
    repository.set_questions(questions)


def question_count(repository: Repository) -> int:
    return repository.question_count
