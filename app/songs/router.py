from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import PlainTextResponse

from app.core.llm.deps import get_openai_client
from app.core.llm.openai_client import OpenAIClient
from app.core.settings import get_settings
from app.songs.schemas import TopSong
from app.songs.service import SongsService

router = APIRouter(prefix="/songs", tags=["songs"])

_LLM_ERROR_RESPONSES = {502: {"description": "LLM service unavailable, failed, or unparseable."}}


def get_songs_service(
    request: Request,
    openai_client: OpenAIClient | None = Depends(get_openai_client),
) -> SongsService:
    request_id = getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID")
    return SongsService(
        llm_client=openai_client,
        system_prompt=get_settings().songs_system_prompt,
        request_id=request_id,
    )


@router.get(
    "/stringprompt/topSong",
    response_class=PlainTextResponse,
    summary="Top song of 1984 (plain text)",
    responses=_LLM_ERROR_RESPONSES,
)
async def get_top_song(svc: SongsService = Depends(get_songs_service)) -> str:
    """Ask the model for the Billboard year-end number-one single of 1984 and return its answer."""

    return await svc.top_song_text()


@router.get(
    "/stringprompt/topSong/{year}",
    response_class=PlainTextResponse,
    summary="Top song of a given year (plain text)",
    responses=_LLM_ERROR_RESPONSES,
)
async def get_top_song_for_year(
    year: str = Path(description="Year, passed to the model verbatim."),
    svc: SongsService = Depends(get_songs_service),
) -> str:
    return await svc.top_song_text_for_year(year=year)


@router.get(
    "/objectreturn/topsong/{year}",
    response_model=TopSong,
    summary="Top song of a given year (structured)",
    responses=_LLM_ERROR_RESPONSES,
)
async def get_top_song_object(
    year: int = Path(description="Numeric year; non-numeric values are rejected with 422."),
    svc: SongsService = Depends(get_songs_service),
) -> TopSong:
    """
    Ask the model to answer in a JSON format derived from `TopSong` and decode the reply.

    The decoded record is returned as reported by the model; it is not cross-checked.
    """

    return await svc.top_song_for_year(year=year)
