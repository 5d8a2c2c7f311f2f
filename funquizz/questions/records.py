"""
Pydantic models for the persisted repository document.

    {
      "type": "intelligent",
      "questions": [
        {"type": "single", "text": "...", "explanation": "...",
         "answers": [{"text": "...", "is_correct": true}, ...]}
      ]
    }
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class AnswerRecord(BaseModel):
    """One stored answer."""

    model_config = ConfigDict(extra="ignore")

    text: StrictStr
    is_correct: StrictBool


class QuestionRecord(BaseModel):
    """One stored question."""

    model_config = ConfigDict(extra="ignore")

    type: str
    text: str
    explanation: str
    answers: list[AnswerRecord] = Field(min_length=1)


class RepositoryDocument(BaseModel):
    """A whole repository file."""

    type: str
    questions: list[QuestionRecord] = Field(default_factory=list)
