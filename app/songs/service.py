from __future__ import annotations

import logging
from typing import Protocol

from app.core.llm.openai_client import (
    ChatResponse,
    EmptyChatResponseError,
    OpenAIUnavailableError,
)
from app.core.llm.structured_output import StructuredOutputConverter
from app.core.metrics import record_llm_usage
from app.songs.prompt import (
    FIXED_TOP_SONG_PROMPT,
    SYSTEM_PROMPT,
    build_top_song_object_prompt,
    build_top_song_prompt,
)
from app.songs.schemas import TopSong

logger = logging.getLogger("app.songs")


class LLMClient(Protocol):
    async def chat(self, *, system_prompt: str, user_prompt: str) -> ChatResponse: ...


def _log_response(*, response: ChatResponse | None, operation: str, request_id: str | None) -> None:
    """Log chat response metadata (never the prompt or the generated text)."""

    if response is None or (response.model is None and response.usage is None):
        logger.info(
            "No LLM response metadata received",
            extra={"request_id": request_id, "operation": operation},
        )
        return

    usage = response.usage
    prompt_tokens = usage.prompt_tokens if usage else None
    completion_tokens = usage.completion_tokens if usage else None
    total_tokens = usage.total_tokens if usage else None

    logger.info(
        "LLM response received",
        extra={
            "request_id": request_id,
            "operation": operation,
            "model": response.model,
            "response_id": response.response_id,
            "finish_reason": response.finish_reason,
            "prompt_tokens": prompt_tokens,
            "completion_tokens": completion_tokens,
            "total_tokens": total_tokens,
        },
    )
    record_llm_usage(
        model=response.model,
        prompt_tokens=prompt_tokens,
        completion_tokens=completion_tokens,
        total_tokens=total_tokens,
    )


class SongsService:
    """Asks the model about Billboard year-end number-one singles. Stateless per call."""

    def __init__(
        self,
        *,
        llm_client: LLMClient | None,
        system_prompt: str = SYSTEM_PROMPT,
        request_id: str | None = None,
    ):
        self._llm = llm_client
        self._system_prompt = system_prompt
        self._request_id = request_id
        self._converter = StructuredOutputConverter(TopSong)

    async def _ask(self, *, user_prompt: str, operation: str) -> str:
        # Checked per call, after path parameters have been validated.
        if self._llm is None:
            raise OpenAIUnavailableError("OPENAI_API_KEY is not configured")

        response = await self._llm.chat(system_prompt=self._system_prompt, user_prompt=user_prompt)
        _log_response(response=response, operation=operation, request_id=self._request_id)

        # Same rule for every operation: blank text means the call failed.
        if response is None or not (response.content or "").strip():
            raise EmptyChatResponseError("LLM response had no content")
        return response.content

    async def top_song_text(self) -> str:
        return await self._ask(user_prompt=FIXED_TOP_SONG_PROMPT, operation="top_song_text")

    async def top_song_text_for_year(self, *, year: str) -> str:
        return await self._ask(
            user_prompt=build_top_song_prompt(year=year), operation="top_song_text_for_year"
        )

    async def top_song_for_year(self, *, year: int) -> TopSong:
        user_prompt = build_top_song_object_prompt(
            year=year, format_instructions=self._converter.format
        )
        text = await self._ask(user_prompt=user_prompt, operation="top_song_for_year")
        return self._converter.convert(text)
