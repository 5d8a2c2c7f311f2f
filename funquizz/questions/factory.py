"""
Question factory: build Questions from stored records or in-memory parameters.

Both paths validate the question and shuffle its answers exactly once, so
the displayed order differs from the stored order and from run to run.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from funquizz.core.errors import MalformedInputError

from . import ScoringVariant, parse_variant
from .base import DEFAULT_EXPLANATION, Answer, Question
from .records import AnswerRecord, QuestionRecord


def _shuffled(answers: Iterable[Answer], rng: random.Random | None) -> tuple[Answer, ...]:
    items = list(answers)
    (rng or random.Random()).shuffle(items)
    return tuple(items)


def _check_variant(tag: Any) -> ScoringVariant:
    if isinstance(tag, ScoringVariant):
        return tag
    if not isinstance(tag, str):
        raise MalformedInputError("Question does not contain a valid 'type' field")
    return parse_variant(tag)


def _check_text(text: Any) -> str:
    if not isinstance(text, str) or not text:
        raise MalformedInputError("Question text cannot be empty")
    return text


def _check_explanation(explanation: Any) -> str:
    if explanation is None:
        return DEFAULT_EXPLANATION
    if not isinstance(explanation, str):
        raise MalformedInputError("Question 'explanation' must be a string")
    return explanation


def question_from_dict(record: Any, rng: random.Random | None = None) -> Question:
    """
    Create a Question from a stored record.

    Validation runs in a fixed order (type tag, known variant, answer
    list, each answer, text) so the first problem found is the one
    reported. Nothing is constructed unless every check passes.

    Args:
        record: Dictionary decoded from the repository document
        rng: Random source for the answer shuffle

    Returns:
        Question with shuffled answers

    Raises:
        MalformedInputError: missing or mistyped fields
        UnknownVariantError: unrecognized question type
    """
    if not isinstance(record, dict):
        raise MalformedInputError("Invalid question format: expected an object")

    variant = _check_variant(record.get("type"))

    raw_answers = record.get("answers")
    if not isinstance(raw_answers, list) or not raw_answers:
        raise MalformedInputError("Question must have at least one answer")

    answers = []
    for position, raw in enumerate(raw_answers, start=1):
        if not isinstance(raw, dict) or "text" not in raw or "is_correct" not in raw:
            raise MalformedInputError(
                "Answer object must contain 'text' and 'is_correct' fields",
                context=f"answer #{position}",
            )
        try:
            parsed = AnswerRecord.model_validate(raw)
        except ValidationError as exc:
            raise MalformedInputError(
                f"Invalid answer: {exc.errors()[0]['msg']}",
                context=f"answer #{position}",
            ) from exc
        answers.append(Answer(text=parsed.text, is_correct=parsed.is_correct))

    text = _check_text(record.get("text"))
    explanation = _check_explanation(record.get("explanation"))

    return Question(
        text=text,
        answers=_shuffled(answers, rng),
        variant=variant,
        explanation=explanation,
    )


def question_from_parameters(
    text: str,
    answers: Iterable[Answer],
    explanation: str | None = None,
    variant: str | ScoringVariant = ScoringVariant.SINGLE,
    rng: random.Random | None = None,
) -> Question:
    """
    Create a Question from in-memory parameters (e.g. the ``add`` command).

    Applies the same validation and shuffling as :func:`question_from_dict`.
    """
    resolved_variant = _check_variant(variant)
    answer_list = list(answers)
    if not answer_list:
        raise MalformedInputError("Question must have at least one answer")
    for position, answer in enumerate(answer_list, start=1):
        if not isinstance(answer, Answer):
            raise MalformedInputError("Expected an Answer", context=f"answer #{position}")
        if not answer.text:
            raise MalformedInputError("Answer text cannot be empty", context=f"answer #{position}")
    return Question(
        text=_check_text(text),
        answers=_shuffled(answer_list, rng),
        variant=resolved_variant,
        explanation=_check_explanation(explanation),
    )


def question_to_dict(question: Question) -> dict:
    """Serialize a Question back to its stored record form."""
    record = QuestionRecord(
        type=question.variant.value,
        text=question.text,
        explanation=question.explanation,
        answers=[
            AnswerRecord(text=a.text, is_correct=a.is_correct)
            for a in question.answers
        ],
    )
    return record.model_dump()
