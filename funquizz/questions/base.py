"""
Answer and Question types.

A Question owns a fixed, already-shuffled tuple of answers. Selections
are submitted as positions into that tuple (the order the user saw).
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field

from funquizz.core.errors import InvalidSelectionError

from . import ScoringVariant, get_scorer

DEFAULT_EXPLANATION = "No explanation provided."


@dataclass(frozen=True)
class Answer:
    """A possible answer to a question."""
    text: str
    is_correct: bool


@dataclass(eq=False)
class Question:
    """
    A quiz question with its answers and scoring variant.

    Questions compare by identity; ``id`` is the stable key used by the
    pool and the selection state.
    """

    text: str
    answers: tuple[Answer, ...]
    variant: ScoringVariant
    explanation: str = DEFAULT_EXPLANATION
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def single_choice(self) -> bool:
        """Whether the question is answered by picking at most one answer."""
        return self.variant.single_choice

    @property
    def correct_answers(self) -> list[Answer]:
        """Answers marked as correct, in display order."""
        return [a for a in self.answers if a.is_correct]

    def selected_answers(self, selected: Iterable[int]) -> list[Answer]:
        """
        Resolve selected positions to answers.

        Raises:
            InvalidSelectionError: position out of range or given twice
        """
        positions = list(selected)
        if len(set(positions)) != len(positions):
            raise InvalidSelectionError("The same answer was selected more than once")
        resolved = []
        for pos in positions:
            if not isinstance(pos, int) or isinstance(pos, bool) or not 0 <= pos < len(self.answers):
                raise InvalidSelectionError(f"No answer at position {pos!r}")
            resolved.append(self.answers[pos])
        return resolved

    def score(self, selected: Iterable[int]) -> float:
        """
        Score a selection of answer positions under this question's variant.

        Args:
            selected: Positions into ``self.answers``

        Returns:
            Score as defined by the scoring variant

        Raises:
            InvalidSelectionError: if the selection breaks the variant's rules
        """
        return get_scorer(self.variant)(self.answers, self.selected_answers(selected))
