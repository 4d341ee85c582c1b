from __future__ import annotations

from fastapi import FastAPI
from fastapi.openapi.docs import get_redoc_html

from app.api.exception_handlers import register_exception_handlers
from app.api.schemas import HealthOut
from app.core.logging import setup_logging
from app.core.metrics import PrometheusMetricsMiddleware, metrics_router
from app.core.middleware.http_logging import HttpLoggingMiddleware
from app.core.settings import get_settings
from app.songs.router import router as songs_router

setup_logging()


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="Songs LLM API",
        description=(
            "Ask a hosted chat-completion model about Billboard year-end number-one singles.\n\n"
            "Design principles:\n"
            "- One stateless model call per request; no retries, no caching.\n"
            "- Structured answers are decoded from model text and are not fact-checked.\n"
            "- Logs and metrics carry metadata only (route templates, model id, token usage)."
        ),
        docs_url="/swagger",  # Swagger UI ("Try it out")
        redoc_url=None,  # custom ReDoc page at /docs
        debug=settings.is_development,
        openapi_tags=[
            {
                "name": "health",
                "description": "Basic uptime check for load balancers and monitoring.",
            },
            {
                "name": "songs",
                "description": (
                    "Top-song questions answered by the model, either as raw text or decoded "
                    "into a `TopSong` record."
                ),
            },
            {
                "name": "metrics",
                "description": "Prometheus-compatible metrics endpoint.",
            },
        ],
    )

    app.add_middleware(PrometheusMetricsMiddleware)
    app.add_middleware(HttpLoggingMiddleware)

    register_exception_handlers(app)

    @app.get("/docs", include_in_schema=False)
    async def redoc_docs():
        return get_redoc_html(
            openapi_url=app.openapi_url or "/openapi.json",
            title=f"{app.title} - ReDoc",
            redoc_js_url="https://cdn.jsdelivr.net/npm/redoc@2.1.4/bundles/redoc.standalone.js",
        )

    @app.get(
        "/health",
        response_model=HealthOut,
        tags=["health"],
        summary="Health check",
        description=(
            "Lightweight endpoint to verify the API process is running.\n\n"
            "Does not call the LLM provider, so it is safe for frequent uptime checks."
        ),
    )
    async def health() -> HealthOut:
        return HealthOut(status="ok")

    app.include_router(metrics_router)
    app.include_router(songs_router)
    return app


app = create_app()
