from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


class OpenAIError(Exception):
    """Base error for OpenAI client failures (safe to map to 502)."""


class OpenAIUnavailableError(OpenAIError):
    """Raised when OpenAI is not configured (e.g., missing API key)."""


class OpenAIUpstreamError(OpenAIError):
    """Raised when OpenAI API fails or returns an unexpected response."""


class EmptyChatResponseError(OpenAIUpstreamError):
    """Raised when a completion carries no text content (refusal, tool call, filtered)."""


@dataclass(frozen=True)
class OpenAIConfig:
    api_key: str
    base_url: str
    model: str
    timeout_seconds: float
    temperature: float | None = None


@dataclass(frozen=True)
class ChatUsage:
    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None


@dataclass(frozen=True)
class ChatResponse:
    """Generated text plus the metadata the provider reported alongside it."""

    content: str | None
    model: str | None = None
    finish_reason: str | None = None
    response_id: str | None = None
    usage: ChatUsage | None = None


def _optional_int(value: Any) -> int | None:
    return value if isinstance(value, int) and not isinstance(value, bool) else None


def _parse_chat_completion(data: Any) -> ChatResponse:
    if not isinstance(data, dict):
        raise OpenAIUpstreamError("LLM response must be a JSON object")

    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        raise OpenAIUpstreamError("LLM response has no choices")

    choice = choices[0]
    message = choice.get("message")
    content = message.get("content") if isinstance(message, dict) else None

    usage: ChatUsage | None = None
    raw_usage = data.get("usage")
    if isinstance(raw_usage, dict):
        usage = ChatUsage(
            prompt_tokens=_optional_int(raw_usage.get("prompt_tokens")),
            completion_tokens=_optional_int(raw_usage.get("completion_tokens")),
            total_tokens=_optional_int(raw_usage.get("total_tokens")),
        )

    return ChatResponse(
        content=content if isinstance(content, str) else None,
        model=data.get("model") if isinstance(data.get("model"), str) else None,
        finish_reason=choice.get("finish_reason"),
        response_id=data.get("id") if isinstance(data.get("id"), str) else None,
        usage=usage,
    )


class OpenAIClient:
    """
    Minimal OpenAI chat-completions client.

    Design notes:
    - No logging in this module; callers log `ChatResponse` metadata.
    - One request per call, no retries, no shared state between calls.
    - `transport` exists so tests can plug in `httpx.MockTransport`.
    """

    def __init__(
        self,
        *,
        config: OpenAIConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        self._transport = transport

    async def chat(self, *, system_prompt: str, user_prompt: str) -> ChatResponse:
        url = f"{self._config.base_url.rstrip('/')}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }
        payload: dict[str, Any] = {
            "model": self._config.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }
        if self._config.temperature is not None:
            payload["temperature"] = self._config.temperature

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout_seconds, transport=self._transport
            ) as client:
                resp = await client.post(url, headers=headers, json=payload)
        except httpx.TimeoutException as exc:
            raise OpenAIUpstreamError("LLM request timed out") from exc
        except httpx.HTTPError as exc:
            raise OpenAIUpstreamError("LLM request failed") from exc

        if resp.status_code != 200:
            # Avoid leaking upstream details to callers; map to generic 502 at the edge.
            raise OpenAIUpstreamError("LLM service returned an error")

        try:
            data = resp.json()
        except ValueError as exc:
            raise OpenAIUpstreamError("LLM response was not valid JSON") from exc

        return _parse_chat_completion(data)
