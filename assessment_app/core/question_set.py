"""Validation of question sets returned by the generation service.

The service is asked for a JSON array of objects shaped like::

    {"question": "...", "options": ["A", "B", "C", "D"],
     "correctAnswerIndex": 1, "explanation": "..."}

Nothing enters the session until every item has passed the pydantic schema
below and the batch has the expected length.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from assessment_app.constants.assessment_constants import OPTIONS_PER_QUESTION, QUESTION_COUNT
from assessment_app.core.models import Question


class QuestionSetError(ValueError):
    """Raised when a generated question set does not match the expected shape."""


class QuestionPayload(BaseModel):
    """Payload schema for a single generated question."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    question: str = Field(min_length=1)
    options: list[str]
    correct_answer_index: int = Field(alias="correctAnswerIndex", ge=0, le=OPTIONS_PER_QUESTION - 1)
    explanation: str = Field(min_length=1)

    @field_validator("options")
    @classmethod
    def _check_options(cls, options: list[str]) -> list[str]:
        cleaned = [option.strip() for option in options]
        if len(cleaned) != OPTIONS_PER_QUESTION:
            raise ValueError(f"exactly {OPTIONS_PER_QUESTION} options are required")
        if any(not option for option in cleaned):
            raise ValueError("option text cannot be empty")
        return cleaned

    def to_question(self) -> Question:
        return Question(
            prompt=self.question,
            options=tuple(self.options),
            correct_index=self.correct_answer_index,
            explanation=self.explanation,
        )


_PAYLOAD_LIST = TypeAdapter(list[QuestionPayload])


def extract_json_text(raw_text: str) -> str:
    """Strip markdown fences and any chatter before the JSON array."""
    text = raw_text.strip().replace("```json", "").replace("```", "").strip()
    if not text.startswith("["):
        start = text.find("[")
        if start == -1:
            raise QuestionSetError("Response did not contain a JSON array.")
        text = text[start:]
    end = text.rfind("]")
    if end == -1:
        raise QuestionSetError("Response JSON array is not terminated.")
    return text[: end + 1]


def parse_question_set(raw: str | list[Any], expected_count: int = QUESTION_COUNT) -> tuple[Question, ...]:
    """Validate a raw service response and convert it to domain questions."""
    if isinstance(raw, str):
        try:
            items = json.loads(extract_json_text(raw))
        except json.JSONDecodeError as exc:
            raise QuestionSetError(f"Response is not valid JSON: {exc.msg}") from exc
    else:
        items = raw

    if not isinstance(items, list):
        raise QuestionSetError("Response must be a list of questions.")

    try:
        payloads = _PAYLOAD_LIST.validate_python(items)
    except ValidationError as exc:
        raise QuestionSetError(f"Response does not match the question schema: {exc.error_count()} error(s).") from exc

    if len(payloads) != expected_count:
        raise QuestionSetError(f"Expected {expected_count} questions, received {len(payloads)}.")

    return tuple(payload.to_question() for payload in payloads)
