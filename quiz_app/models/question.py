"""Question models for the quiz API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Question(BaseModel):
    """A single multiple-choice question held by the question store."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1)
    options: tuple[str, str, str, str]
    correct_index: int = Field(..., ge=0, le=3)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("question text must not be blank")
        return value


class QuestionResponse(BaseModel):
    """Question shape returned to the client."""

    question: str
    options: list[str]
    correctIndex: int

    @classmethod
    def from_question(cls, question: Question) -> QuestionResponse:
        return cls(
            question=question.text,
            options=list(question.options),
            correctIndex=question.correct_index,
        )


class AppInfo(BaseModel):
    """Application information model."""

    version: str
    name: str
