"""
Question selection strategies.

Three policies decide which question comes next:

- random: uniform draw from the whole pool, repeats allowed
- random_non_repeating: every question once per cycle, then refill
- intelligent: like random_non_repeating, but a new cycle is seeded with
  the questions answered imperfectly in the previous one ("hard" set)
  when there are any

Each policy is a pair of plain functions (draw, feedback) operating on a
SelectionState; ``draw`` / ``feedback`` / ``reset`` dispatch on the tag.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from loguru import logger

from funquizz.core.errors import EmptyPoolError, UnknownVariantError

from .pool import Pool

PERFECT_SCORE = 1.0


class RepositoryType(str, Enum):
    """Selection strategy of a repository, valued by its persisted tag."""

    RANDOM = "random"
    RANDOM_NON_REPEATING = "random_non_repeating"
    INTELLIGENT = "intelligent"


def parse_repository_type(tag: str | RepositoryType) -> RepositoryType:
    """Resolve a persisted tag to its RepositoryType."""
    if isinstance(tag, RepositoryType):
        return tag
    try:
        return RepositoryType(tag)
    except ValueError:
        raise UnknownVariantError(f"Unknown repository type: {tag}") from None


@dataclass
class SelectionState:
    """Per-cycle bookkeeping, as question ids into the pool."""

    remaining: set[str] = field(default_factory=set)
    hard: set[str] = field(default_factory=set)

    def discard(self, question_id: str) -> None:
        self.remaining.discard(question_id)
        self.hard.discard(question_id)


def _pick(pool: Pool, candidates: set[str], rng: random.Random) -> str:
    # Pool order keeps seeded draws reproducible; set order is not.
    ordered = [qid for qid in pool.ids if qid in candidates]
    return rng.choice(ordered)


# =============================================================================
# Draw
# =============================================================================


def draw_random(pool: Pool, state: SelectionState, rng: random.Random) -> str:
    return rng.choice(pool.ids)


def draw_non_repeating(pool: Pool, state: SelectionState, rng: random.Random) -> str:
    if not state.remaining:
        logger.debug(f"Cycle exhausted, refilling from pool ({len(pool)} questions)")
        state.remaining = set(pool.ids)
    question_id = _pick(pool, state.remaining, rng)
    state.remaining.discard(question_id)
    return question_id


def draw_intelligent(pool: Pool, state: SelectionState, rng: random.Random) -> str:
    if not state.remaining:
        if state.hard:
            logger.debug(f"Cycle exhausted, repeating {len(state.hard)} hard questions")
            state.remaining = set(state.hard)
        else:
            logger.debug(f"Cycle exhausted, refilling from pool ({len(pool)} questions)")
            state.remaining = set(pool.ids)
        state.hard.clear()
    question_id = _pick(pool, state.remaining, rng)
    state.remaining.discard(question_id)
    return question_id


# =============================================================================
# Feedback
# =============================================================================


def feedback_ignore(state: SelectionState, question_id: str, score: float) -> None:
    """Random policies do not track performance."""


def feedback_intelligent(state: SelectionState, question_id: str, score: float) -> None:
    if score < PERFECT_SCORE:
        state.hard.add(question_id)


# =============================================================================
# Dispatch
# =============================================================================


@dataclass(frozen=True)
class SelectionPolicy:
    draw: Callable[[Pool, SelectionState, random.Random], str]
    feedback: Callable[[SelectionState, str, float], None]
    tracks_cycle: bool


POLICIES: dict[RepositoryType, SelectionPolicy] = {
    RepositoryType.RANDOM: SelectionPolicy(draw_random, feedback_ignore, tracks_cycle=False),
    RepositoryType.RANDOM_NON_REPEATING: SelectionPolicy(
        draw_non_repeating, feedback_ignore, tracks_cycle=True
    ),
    RepositoryType.INTELLIGENT: SelectionPolicy(
        draw_intelligent, feedback_intelligent, tracks_cycle=True
    ),
}


def draw(
    repository_type: RepositoryType, pool: Pool, state: SelectionState, rng: random.Random
) -> str:
    """
    Choose the next question id.

    Raises:
        EmptyPoolError: if the pool has no questions
    """
    if not len(pool):
        raise EmptyPoolError("No questions available in the repository")
    return POLICIES[repository_type].draw(pool, state, rng)


def feedback(
    repository_type: RepositoryType, state: SelectionState, question_id: str, score: float
) -> None:
    """Report the score earned on a drawn question."""
    POLICIES[repository_type].feedback(state, question_id, score)


def reset(repository_type: RepositoryType, pool: Pool, state: SelectionState) -> None:
    """Start a fresh cycle mirroring the pool."""
    state.hard.clear()
    if POLICIES[repository_type].tracks_cycle:
        state.remaining = set(pool.ids)
    else:
        state.remaining.clear()
