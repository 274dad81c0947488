"""Question generation through the Anthropic Messages API."""

from __future__ import annotations

import logging
import time
from typing import Any, Protocol, Sequence

import anthropic

from assessment_app.constants.assessment_constants import (
    GENERATION_MAX_ATTEMPTS,
    GENERATION_MAX_TOKENS,
    GENERATION_PROMPT,
    GENERATION_RETRY_DELAY_SECONDS,
    QUESTION_COUNT,
)
from assessment_app.core.models import Question
from assessment_app.core.question_set import QuestionSetError, parse_question_set

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Raised when a question set cannot be obtained from the service."""


class QuestionGenerator(Protocol):
    """Source of a fresh question set for one attempt."""

    def generate(self) -> Sequence[Question]:
        ...


class AnthropicQuestionGenerator:
    """Requests a question set from Claude and validates the reply."""

    def __init__(
        self,
        api_key: str | None,
        model: str,
        *,
        prompt: str = GENERATION_PROMPT,
        expected_count: int = QUESTION_COUNT,
        max_attempts: int = GENERATION_MAX_ATTEMPTS,
        retry_delay_seconds: float = GENERATION_RETRY_DELAY_SECONDS,
        client: Any | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self._api_key = api_key
        self._model = model
        self._prompt = prompt
        self._expected_count = expected_count
        self._max_attempts = max_attempts
        self._retry_delay_seconds = retry_delay_seconds
        self._client = client

    def generate(self) -> tuple[Question, ...]:
        client = self._get_client()
        last_error: str | None = None

        for attempt in range(1, self._max_attempts + 1):
            try:
                response = client.messages.create(
                    model=self._model,
                    max_tokens=GENERATION_MAX_TOKENS,
                    messages=[{"role": "user", "content": self._prompt}],
                )
                questions = parse_question_set(_response_text(response), self._expected_count)
            except (anthropic.APIError, QuestionSetError) as exc:
                last_error = str(exc)
                logger.warning("Question generation attempt %d/%d failed: %s", attempt, self._max_attempts, exc)
                if attempt < self._max_attempts:
                    time.sleep(self._retry_delay_seconds)
                continue

            logger.info("Generated %d questions with %s", len(questions), self._model)
            return questions

        raise GenerationError(
            f"Could not generate questions after {self._max_attempts} attempt(s). Last error: {last_error}"
        )

    def _get_client(self) -> Any:
        if self._client is not None:
            return self._client
        if not self._api_key:
            raise GenerationError("ANTHROPIC_API_KEY is not configured.")
        self._client = anthropic.Anthropic(api_key=self._api_key)
        return self._client


def _response_text(response: Any) -> str:
    parts = [getattr(block, "text", "") for block in getattr(response, "content", None) or []]
    text = "".join(part for part in parts if part)
    if not text.strip():
        raise QuestionSetError("No data returned from the generation service.")
    return text
