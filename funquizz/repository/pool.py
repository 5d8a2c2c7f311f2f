"""
Question pool: ordered arena of the questions owned by one repository.

Selection state never holds Questions directly; it holds question ids that
index into the pool, so dropping a question from the pool is the only
place a question is released.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from loguru import logger

from funquizz.questions import Question


class Pool:
    """Ordered collection of questions keyed by question id."""

    def __init__(self, questions: Iterable[Question] = ()):
        self._questions: dict[str, Question] = {}
        for question in questions:
            self.append(question)

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions.values())

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._questions

    @property
    def ids(self) -> list[str]:
        """Question ids in pool order."""
        return list(self._questions)

    def get(self, question_id: str) -> Question:
        return self._questions[question_id]

    def append(self, question: Question) -> bool:
        """Add a question at the end. Returns False if it is already owned."""
        if question.id in self._questions:
            logger.warning(f"Question already in pool, ignoring: {question.text!r}")
            return False
        self._questions[question.id] = question
        return True

    def remove(self, question_id: str) -> Question:
        """Drop a question from the pool and return it."""
        return self._questions.pop(question_id)

    def replace(self, questions: Iterable[Question]) -> list[Question]:
        """
        Replace the pool contents.

        Returns:
            The previously owned questions that are absent from the new set
        """
        old = self._questions
        self._questions = {}
        for question in questions:
            self.append(question)
        return [q for qid, q in old.items() if qid not in self._questions]

    def find_by_text(self, text: str) -> Question | None:
        for question in self._questions.values():
            if question.text == text:
                return question
        return None
