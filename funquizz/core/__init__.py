"""
Core Module - Shared error types.

All domain modules (questions, repository, study, cli) raise and catch
the exceptions defined here rather than defining their own.
"""

from funquizz.core.errors import (
    EmptyPoolError,
    InvalidSelectionError,
    IOFailureError,
    MalformedInputError,
    QuizError,
    UnknownVariantError,
)

__all__ = [
    "QuizError",
    "MalformedInputError",
    "UnknownVariantError",
    "InvalidSelectionError",
    "EmptyPoolError",
    "IOFailureError",
]
