from __future__ import annotations

from dataclasses import dataclass

from openai import AsyncOpenAI


@dataclass
class OpenAIResult:
    text: str
    model: str
    response_id: str | None = None
    prompt_tokens: int = 0
    completion_tokens: int = 0


class OpenAIService:
    """Process-wide generation client. Build once at startup and share."""

    def __init__(self, *, api_key: str | None, model: str, timeout_sec: float = 60, client: AsyncOpenAI | None = None):
        if client is None:
            if not api_key:
                raise RuntimeError("OPENAI_API_KEY is not set")
            client = AsyncOpenAI(api_key=api_key, timeout=timeout_sec)
        self._client = client
        self.model = model

    async def generate_text(self, prompt: str) -> OpenAIResult:
        # Single attempt; the SDK's own retries are disabled per call.
        resp = await self._client.with_options(max_retries=0).responses.create(
            model=self.model,
            input=prompt,
        )
        usage = getattr(resp, "usage", None)
        prompt_tokens = int(getattr(usage, "input_tokens", 0) or 0) if usage is not None else 0
        completion_tokens = int(getattr(usage, "output_tokens", 0) or 0) if usage is not None else 0

        return OpenAIResult(
            text=getattr(resp, "output_text", None) or "",
            model=self.model,
            response_id=getattr(resp, "id", None),
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
        )

    async def close(self) -> None:
        await self._client.close()
