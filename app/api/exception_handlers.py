from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.llm.openai_client import OpenAIError, OpenAIUnavailableError
from app.domain.exceptions import StructuredOutputError

logger = logging.getLogger("app.llm_errors")


def _log_failure(*, request: Request, status_code: int, error: str) -> None:
    # Metadata only: no prompt, no model output, no query string.
    request_id = getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID")
    logger.info(
        "LLM request failed",
        extra={
            "request_id": request_id,
            "http_method": request.method,
            "request_path": request.url.path,
            "status_code": status_code,
            "error": error,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers."""

    @app.exception_handler(OpenAIUnavailableError)
    async def handle_llm_unavailable(request: Request, exc: OpenAIUnavailableError) -> JSONResponse:
        _log_failure(request=request, status_code=502, error="llm_unavailable")
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "LLM service unavailable"},
        )

    @app.exception_handler(OpenAIError)
    async def handle_llm_error(request: Request, exc: OpenAIError) -> JSONResponse:
        _log_failure(request=request, status_code=502, error=type(exc).__name__)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "LLM service failed"},
        )

    @app.exception_handler(StructuredOutputError)
    async def handle_structured_output_error(
        request: Request,
        exc: StructuredOutputError,
    ) -> JSONResponse:
        _log_failure(request=request, status_code=502, error="structured_output")
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "LLM output could not be converted"},
        )
