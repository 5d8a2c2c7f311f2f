"""
Single-choice scoring variants.

- single: exactly one answer; 1 if correct, 0 otherwise
- negative_single: exactly one answer; 1 if correct, -1 otherwise
- skippable_negative_single: zero or one answer; skipping scores 0
"""

from __future__ import annotations

from collections.abc import Sequence

from funquizz.core.errors import InvalidSelectionError

from . import ScoringVariant, register
from .base import Answer


def _only_selected(selected: Sequence[Answer]) -> Answer:
    if not selected:
        raise InvalidSelectionError("No answer selected")
    if len(selected) > 1:
        raise InvalidSelectionError("Multiple answers selected for a single choice question")
    return selected[0]


@register(ScoringVariant.SINGLE)
def score_single(answers: Sequence[Answer], selected: Sequence[Answer]) -> float:
    return 1.0 if _only_selected(selected).is_correct else 0.0


@register(ScoringVariant.NEGATIVE_SINGLE)
def score_negative_single(answers: Sequence[Answer], selected: Sequence[Answer]) -> float:
    return 1.0 if _only_selected(selected).is_correct else -1.0


@register(ScoringVariant.SKIPPABLE_NEGATIVE_SINGLE)
def score_skippable_negative_single(answers: Sequence[Answer], selected: Sequence[Answer]) -> float:
    """An empty selection is an explicit skip and scores 0."""
    if not selected:
        return 0.0
    return 1.0 if _only_selected(selected).is_correct else -1.0
