from __future__ import annotations

import logging
from dataclasses import dataclass

from toneswap.core.errors import (
    GENERATION_UNAVAILABLE_MESSAGE,
    GenerationError,
    TransformValidationError,
)
from toneswap.services.openai_client import OpenAIService
from toneswap.services.tone_catalog import Tone, prompt_for


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransformResult:
    transformed_text: str | None = None
    error: str | None = None
    # Only set on validation failures; lets the HTTP layer pick a status code.
    is_validation_error: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


def validate_input(text: str | None) -> str:
    if not (text or "").strip():
        raise TransformValidationError()
    return text


class TransformationService:
    def __init__(self, openai: OpenAIService):
        self._openai = openai

    async def generate(self, text: str, tone: Tone) -> str:
        """Call the generator once. Raises GenerationError with the real cause chained."""
        prompt = prompt_for(text, tone)
        try:
            res = await self._openai.generate_text(prompt)
        except Exception as e:
            raise GenerationError(f"{type(e).__name__}: {e}") from e
        if not res.text.strip():
            raise GenerationError(f"empty response from {res.model} (response_id={res.response_id})")
        return res.text

    async def transform(self, text: str, tone: Tone) -> TransformResult:
        try:
            validate_input(text)
        except TransformValidationError as e:
            return TransformResult(error=e.message, is_validation_error=True)

        try:
            transformed = await self.generate(text, tone)
        except GenerationError:
            log.exception("[transform] generation failed tone=%s model=%s", tone.value, self._openai.model)
            return TransformResult(error=GENERATION_UNAVAILABLE_MESSAGE)

        return TransformResult(transformed_text=transformed)
