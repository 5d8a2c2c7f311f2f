"""
Error taxonomy for quiz loading, scoring and selection.

Two families:
- Fatal: abort the load / construction / save that raised them
  (MalformedInputError, UnknownVariantError, IOFailureError)
- Recoverable: reported to the user, repository stays intact
  (InvalidSelectionError, EmptyPoolError)

Callers branch on ``exc.recoverable`` instead of on the concrete class
when they only need to decide whether to keep going.
"""

from __future__ import annotations


class QuizError(Exception):
    """Base class for every error raised by funquizz."""

    recoverable: bool = False

    def __init__(self, message: str, *, context: str | None = None):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message

    def with_context(self, context: str) -> QuizError:
        """Return a copy of this error prefixed with additional context."""
        combined = f"{context}: {self.context}" if self.context else context
        return type(self)(self.message, context=combined)


class MalformedInputError(QuizError):
    """Raised when stored or supplied data is missing fields or has wrong types."""


class UnknownVariantError(QuizError):
    """Raised for an unrecognized scoring variant or repository strategy tag."""


class InvalidSelectionError(QuizError):
    """Raised when a selection violates the scoring variant's count rule."""

    recoverable = True


class EmptyPoolError(QuizError):
    """Raised when a question is requested from an empty pool."""

    recoverable = True


class IOFailureError(QuizError):
    """Raised when a repository file cannot be read or written."""
