"""
Unit tests for the question selection strategies.
"""

import random

import pytest

from funquizz.core.errors import EmptyPoolError, UnknownVariantError
from funquizz.repository import Pool, RepositoryType, SelectionState, parse_repository_type
from funquizz.repository import strategies


@pytest.fixture
def pool(make_question):
    return Pool(make_question(text=f"Q{i}") for i in range(5))


class TestParseRepositoryType:

    def test_known_tags(self):
        assert parse_repository_type("random") is RepositoryType.RANDOM
        assert parse_repository_type("random_non_repeating") is RepositoryType.RANDOM_NON_REPEATING
        assert parse_repository_type("intelligent") is RepositoryType.INTELLIGENT

    def test_unknown_tag(self):
        with pytest.raises(UnknownVariantError):
            parse_repository_type("sequential")


class TestEmptyPool:

    @pytest.mark.parametrize("repository_type", list(RepositoryType))
    def test_draw_from_empty_pool(self, repository_type, rng):
        with pytest.raises(EmptyPoolError):
            strategies.draw(repository_type, Pool(), SelectionState(), rng)


class TestRandom:

    def test_draws_from_whole_pool(self, pool, rng):
        state = SelectionState()
        drawn = {strategies.draw(RepositoryType.RANDOM, pool, state, rng) for _ in range(200)}
        assert drawn == set(pool.ids)
        assert state.remaining == set()

    def test_feedback_is_noop(self, pool):
        state = SelectionState()
        strategies.feedback(RepositoryType.RANDOM, state, pool.ids[0], -1.0)
        assert state == SelectionState()


class TestRandomNonRepeating:

    def test_cycle_visits_every_question_once(self, pool, rng):
        state = SelectionState()
        strategies.reset(RepositoryType.RANDOM_NON_REPEATING, pool, state)

        drawn = [strategies.draw(RepositoryType.RANDOM_NON_REPEATING, pool, state, rng) for _ in range(5)]

        assert sorted(drawn) == sorted(pool.ids)
        assert state.remaining == set()

    def test_refills_after_exhaustion(self, pool, rng):
        state = SelectionState()
        for _ in range(5):
            strategies.draw(RepositoryType.RANDOM_NON_REPEATING, pool, state, rng)

        sixth = strategies.draw(RepositoryType.RANDOM_NON_REPEATING, pool, state, rng)

        assert sixth in pool.ids
        assert len(state.remaining) == 4

    def test_feedback_is_noop(self, pool):
        state = SelectionState(remaining=set(pool.ids))
        strategies.feedback(RepositoryType.RANDOM_NON_REPEATING, state, pool.ids[0], 0.0)
        assert state.hard == set()

    def test_seeded_draws_are_reproducible(self, pool):
        def sequence(seed):
            state = SelectionState()
            rng = random.Random(seed)
            return [strategies.draw(RepositoryType.RANDOM_NON_REPEATING, pool, state, rng) for _ in range(10)]

        assert sequence(42) == sequence(42)


class TestIntelligent:

    def test_imperfect_score_marks_hard(self, pool):
        state = SelectionState()
        strategies.feedback(RepositoryType.INTELLIGENT, state, pool.ids[0], 0.5)
        strategies.feedback(RepositoryType.INTELLIGENT, state, pool.ids[1], 1.0)
        strategies.feedback(RepositoryType.INTELLIGENT, state, pool.ids[0], -1.0)
        assert state.hard == {pool.ids[0]}

    def test_hard_questions_seed_next_cycle(self, pool, rng):
        state = SelectionState()
        strategies.reset(RepositoryType.INTELLIGENT, pool, state)
        hard = set(pool.ids[:2])

        for _ in range(5):
            question_id = strategies.draw(RepositoryType.INTELLIGENT, pool, state, rng)
            strategies.feedback(
                RepositoryType.INTELLIGENT, state, question_id, 0.0 if question_id in hard else 1.0
            )
        assert state.hard == hard

        next_cycle = {strategies.draw(RepositoryType.INTELLIGENT, pool, state, rng) for _ in range(2)}

        assert next_cycle == hard
        assert state.hard == set()
        assert state.remaining == set()

    def test_falls_back_to_pool_without_hard_questions(self, pool, rng):
        state = SelectionState()
        for _ in range(5):
            question_id = strategies.draw(RepositoryType.INTELLIGENT, pool, state, rng)
            strategies.feedback(RepositoryType.INTELLIGENT, state, question_id, 1.0)

        strategies.draw(RepositoryType.INTELLIGENT, pool, state, rng)

        assert len(state.remaining) == 4

    def test_hard_cleared_once_seeded(self, pool, rng):
        state = SelectionState(hard={pool.ids[3]})

        drawn = strategies.draw(RepositoryType.INTELLIGENT, pool, state, rng)

        assert drawn == pool.ids[3]
        assert state.hard == set()


class TestReset:

    def test_tracking_strategies_mirror_pool(self, pool):
        for repository_type in (RepositoryType.RANDOM_NON_REPEATING, RepositoryType.INTELLIGENT):
            state = SelectionState(remaining={"gone"}, hard={"gone"})
            strategies.reset(repository_type, pool, state)
            assert state.remaining == set(pool.ids)
            assert state.hard == set()

    def test_random_keeps_no_state(self, pool):
        state = SelectionState(remaining={"gone"})
        strategies.reset(RepositoryType.RANDOM, pool, state)
        assert state == SelectionState()
