"""
Repository module: question pools, selection strategies and storage.

This module provides:
- Repository: pool + selection strategy aggregate
- RepositoryType: random / random_non_repeating / intelligent
- load_repository / save_repository / create_repository: JSON storage
- next_question / score_and_feedback / replace_questions / question_count:
  the operations a presentation layer drives a quiz with
"""

from .pool import Pool
from .repository import (
    Repository,
    next_question,
    question_count,
    replace_questions,
    score_and_feedback,
)
from .store import create_repository, load_repository, save_repository
from .strategies import RepositoryType, SelectionState, parse_repository_type

__all__ = [
    "Pool",
    "Repository",
    "RepositoryType",
    "SelectionState",
    "create_repository",
    "load_repository",
    "next_question",
    "parse_repository_type",
    "question_count",
    "replace_questions",
    "save_repository",
    "score_and_feedback",
]
