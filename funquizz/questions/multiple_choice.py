"""
Multiple-choice scoring variants.

Each answer is worth ``1 / correct_count`` (or ``1 / len(answers)`` when
no answer is correct). Selected correct answers add that value, selected
incorrect ones subtract it, so picking exactly the correct subset scores
1.0 regardless of how many answers are correct.
"""

from __future__ import annotations

from collections.abc import Sequence

from . import ScoringVariant, register
from .base import Answer


def _value_base(answers: Sequence[Answer]) -> int:
    correct_count = sum(1 for a in answers if a.is_correct)
    return correct_count or len(answers)


def answer_value(answers: Sequence[Answer]) -> float:
    """Value of a single answer within the question."""
    return 1.0 / _value_base(answers)


def _raw_score(answers: Sequence[Answer], selected: Sequence[Answer]) -> float:
    # Integer tally divided once keeps a perfect pick at exactly 1.0
    hits = sum(1 for a in selected if a.is_correct)
    misses = len(selected) - hits
    return (hits - misses) / _value_base(answers)


@register(ScoringVariant.MULTIPLE)
def score_multiple(answers: Sequence[Answer], selected: Sequence[Answer]) -> float:
    """Never negative."""
    return max(0.0, _raw_score(answers, selected))


@register(ScoringVariant.NEGATIVE_MULTIPLE)
def score_negative_multiple(answers: Sequence[Answer], selected: Sequence[Answer]) -> float:
    return _raw_score(answers, selected)
