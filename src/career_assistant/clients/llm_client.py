"""Claude API wrapper for schema-bound and free-text generation."""

from __future__ import annotations

import json
import logging

import anthropic
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from career_assistant.errors import GenerationError
from career_assistant.models.generation import (
    ContentPart,
    FilePart,
    GenerationRequest,
    GenerationResult,
    TextPart,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-haiku-4-5-20251001"


def _to_block(part: ContentPart) -> dict:
    if isinstance(part, FilePart):
        return {
            "type": "document",
            "source": {
                "type": "base64",
                "media_type": part.media_type,
                "data": part.data,
            },
        }
    return {"type": "text", "text": part.text}


class LLMClient:
    """Async Claude API client.

    Schema-bound requests are sent with a single forced tool whose input
    schema is the declared output schema; the tool input comes back as JSON
    text so callers parse it like any other untrusted payload.
    """

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        *,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 8192,
        max_attempts: int = 1,
    ):
        kwargs: dict = {}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self.model = model
        self.max_tokens = max_tokens
        self.max_attempts = max_attempts
        self.retry_wait = wait_exponential(min=1, max=10)
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    def _build_kwargs(self, request: GenerationRequest) -> dict:
        kwargs: dict = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": request.temperature,
            "messages": [
                {"role": "user", "content": [_to_block(p) for p in request.parts]},
            ],
        }
        if request.system:
            kwargs["system"] = request.system
        if request.schema is not None:
            tool_name = request.operation.value
            kwargs["tools"] = [
                {
                    "name": tool_name,
                    "description": "Record the result as structured JSON.",
                    "input_schema": request.schema,
                }
            ]
            kwargs["tool_choice"] = {"type": "tool", "name": tool_name}
        return kwargs

    async def _call_api(self, kwargs: dict) -> anthropic.types.Message:
        """Make the API call, retrying only when more than one attempt is configured."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=self.retry_wait,
            retry=retry_if_exception_type(anthropic.APIError),
            reraise=True,
        ):
            with attempt:
                return await self.client.messages.create(**kwargs)

    @staticmethod
    def _extract_text(message: anthropic.types.Message) -> str:
        texts = []
        for block in message.content:
            if block.type == "tool_use":
                return json.dumps(block.input, ensure_ascii=False)
            if block.type == "text":
                texts.append(block.text)
        return "".join(texts)

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Send a request to Claude and return the raw text with usage."""
        logger.debug(
            "LLM call: op=%s model=%s temperature=%s structured=%s",
            request.operation.value,
            self.model,
            request.temperature,
            request.structured,
        )
        try:
            message = await self._call_api(self._build_kwargs(request))
        except Exception as exc:
            logger.error("LLM call failed: %s", request.operation.value, exc_info=True)
            raise GenerationError(f"{request.operation.value} generation failed", cause=exc) from exc

        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((self.model, input_tokens, output_tokens))
        return GenerationResult(
            text=self._extract_text(message) or "",
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            metadata={"model": self.model, "stop_reason": message.stop_reason},
        )

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary
