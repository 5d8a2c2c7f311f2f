"""
Question scoring variants for FunQuizz.

Each scoring variant (single, multiple, negative_single, ...) is a pure
function registered against its tag:

    score(answers, selected) -> float

where ``answers`` is the question's full answer tuple and ``selected`` is
the list of answers the user picked. Variants hold no state.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
from typing import TYPE_CHECKING

from funquizz.core.errors import UnknownVariantError

if TYPE_CHECKING:
    from .base import Answer


class ScoringVariant(str, Enum):
    """Supported scoring variants, valued by their persisted tag."""
    SINGLE = "single"
    NEGATIVE_SINGLE = "negative_single"
    SKIPPABLE_NEGATIVE_SINGLE = "skippable_negative_single"
    MULTIPLE = "multiple"
    NEGATIVE_MULTIPLE = "negative_multiple"

    @property
    def single_choice(self) -> bool:
        """True when at most one answer may be selected (radio-style input)."""
        return self in {
            ScoringVariant.SINGLE,
            ScoringVariant.NEGATIVE_SINGLE,
            ScoringVariant.SKIPPABLE_NEGATIVE_SINGLE,
        }

    @property
    def skippable(self) -> bool:
        """True when an empty selection is a valid answer."""
        return self is not ScoringVariant.SINGLE and self is not ScoringVariant.NEGATIVE_SINGLE


Scorer = Callable[[Sequence["Answer"], Sequence["Answer"]], float]

# Scorer registry - populated by @register decorator
SCORERS: dict[ScoringVariant, Scorer] = {}


def register(variant: ScoringVariant):
    """Decorator to register a scoring function for a variant."""
    def decorator(func: Scorer) -> Scorer:
        SCORERS[variant] = func
        return func
    return decorator


def parse_variant(tag: str | ScoringVariant) -> ScoringVariant:
    """Resolve a persisted tag to its ScoringVariant."""
    if isinstance(tag, ScoringVariant):
        return tag
    try:
        return ScoringVariant(tag)
    except ValueError:
        raise UnknownVariantError(f"Unknown question type: {tag}") from None


def get_scorer(variant: str | ScoringVariant) -> Scorer:
    """Get the scoring function for a variant."""
    return SCORERS[parse_variant(variant)]


# Import scorers to trigger registration
from . import single_choice
from . import multiple_choice

from .base import DEFAULT_EXPLANATION, Answer, Question
from .factory import (
    question_from_dict,
    question_from_parameters,
    question_to_dict,
)

__all__ = [
    "ScoringVariant",
    "SCORERS",
    "DEFAULT_EXPLANATION",
    "Answer",
    "Question",
    "get_scorer",
    "parse_variant",
    "question_from_dict",
    "question_from_parameters",
    "question_to_dict",
    "register",
]
