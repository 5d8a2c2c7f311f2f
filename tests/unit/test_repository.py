"""
Unit tests for the Repository aggregate.
"""

import pytest

from funquizz.core.errors import (
    EmptyPoolError,
    InvalidSelectionError,
    MalformedInputError,
    UnknownVariantError,
)
from funquizz.repository import (
    Repository,
    RepositoryType,
    next_question,
    question_count,
    replace_questions,
    score_and_feedback,
)


@pytest.fixture
def questions(make_question):
    return [make_question(text=f"Q{i}") for i in range(4)]


@pytest.fixture
def intelligent(questions, rng):
    return Repository(RepositoryType.INTELLIGENT, questions, rng=rng)


class TestSelection:

    @pytest.mark.parametrize("repository_type", list(RepositoryType))
    def test_empty_repository_raises_and_stays_usable(self, repository_type, make_question, rng):
        repository = Repository(repository_type, rng=rng)
        with pytest.raises(EmptyPoolError):
            repository.next()

        repository.add_question(make_question())
        assert repository.next().text == "Q"

    def test_non_repeating_cycle(self, questions, rng):
        repository = Repository("random_non_repeating", questions, rng=rng)
        drawn = [repository.next() for _ in range(4)]
        assert {q.id for q in drawn} == {q.id for q in questions}

    def test_score_and_feedback_marks_hard(self, intelligent):
        question = intelligent.next()
        score = intelligent.score_and_feedback(question, [1])
        assert score == 0.0
        assert intelligent.state.hard == {question.id}

    def test_perfect_multiple_choice_not_marked_hard(self, make_question, rng):
        answers = tuple((f"right {i}", True) for i in range(6)) + (("wrong", False),)
        question = make_question(answers=answers, variant="multiple")
        repository = Repository(RepositoryType.INTELLIGENT, [question], rng=rng)

        drawn = repository.next()
        assert repository.score_and_feedback(drawn, range(6)) == 1.0
        assert repository.state.hard == set()

    def test_invalid_selection_leaves_state_untouched(self, intelligent):
        question = intelligent.next()
        remaining = set(intelligent.state.remaining)

        with pytest.raises(InvalidSelectionError):
            intelligent.score_and_feedback(question, [0, 1])

        assert intelligent.state.hard == set()
        assert intelligent.state.remaining == remaining

    def test_feedback_for_foreign_question_ignored(self, intelligent, make_question):
        intelligent.feedback(make_question(text="elsewhere"), 0.0)
        assert intelligent.state.hard == set()


class TestPoolEdits:

    def test_set_questions_drops_missing_and_resets_state(self, intelligent, questions, make_question):
        intelligent.next()
        intelligent.feedback(questions[0], 0.0)
        extra = make_question(text="new")

        dropped = intelligent.set_questions([questions[1], extra])

        assert {q.id for q in dropped} == {questions[0].id, questions[2].id, questions[3].id}
        assert intelligent.question_count == 2
        assert intelligent.state.remaining == {questions[1].id, extra.id}
        assert intelligent.state.hard == set()

    def test_set_questions_ignores_duplicates(self, intelligent, questions):
        intelligent.set_questions([questions[0], questions[0]])
        assert intelligent.question_count == 1

    def test_remove_purges_selection_state(self, intelligent, questions):
        intelligent.feedback(questions[2], 0.0)

        intelligent.remove_question(questions[2].id)

        assert questions[2].id not in intelligent.state.remaining
        assert questions[2].id not in intelligent.state.hard
        assert all(intelligent.next().id != questions[2].id for _ in range(3))

    def test_remove_unknown_id(self, intelligent):
        with pytest.raises(KeyError):
            intelligent.remove_question("missing")

    def test_add_rejects_duplicate_text(self, intelligent, make_question):
        with pytest.raises(MalformedInputError):
            intelligent.add_question(make_question(text="Q1"))

    def test_add_joins_draining_cycle(self, intelligent, make_question):
        intelligent.next()
        extra = make_question(text="late")
        intelligent.add_question(extra)
        assert extra.id in intelligent.state.remaining


class TestDocument:

    def test_from_document(self, sample_document, rng):
        repository = Repository.from_document(sample_document, rng=rng)
        assert repository.repository_type is RepositoryType.INTELLIGENT
        assert repository.question_count == 5

    def test_missing_type(self, sample_document, rng):
        del sample_document["type"]
        with pytest.raises(MalformedInputError):
            Repository.from_document(sample_document, rng=rng)

    def test_unknown_type(self, sample_document, rng):
        sample_document["type"] = "sequential"
        with pytest.raises(UnknownVariantError):
            Repository.from_document(sample_document, rng=rng)

    def test_missing_questions(self, rng):
        with pytest.raises(MalformedInputError):
            Repository.from_document({"type": "random"}, rng=rng)

    def test_bad_question_aborts_with_position(self, sample_document, rng):
        sample_document["questions"][3]["type"] = "essay"
        with pytest.raises(UnknownVariantError) as exc_info:
            Repository.from_document(sample_document, rng=rng)
        assert "question #4" in str(exc_info.value)

    def test_to_document_keeps_strategy_tag(self, sample_document, rng):
        for tag in ("random", "random_non_repeating", "intelligent"):
            sample_document["type"] = tag
            document = Repository.from_document(sample_document, rng=rng).to_document()
            assert document["type"] == tag
            assert [q["type"] for q in document["questions"]] == [
                q["type"] for q in sample_document["questions"]
            ]


class TestCollaboratorOperations:

    def test_operations(self, questions, make_question, rng):
        repository = Repository("random", questions, rng=rng)
        assert question_count(repository) == 4

        question = next_question(repository)
        assert score_and_feedback(repository, question, [0]) == 1.0

        replace_questions(repository, [make_question(text="only")])
        assert question_count(repository) == 1
        assert next_question(repository).text == "only"
