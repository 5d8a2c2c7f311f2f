"""
Study module: interactive quiz sessions over a repository.
"""

from .session import AnswerResult, QuizSession

__all__ = [
    "AnswerResult",
    "QuizSession",
]
