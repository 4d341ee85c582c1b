from __future__ import annotations

import time
from typing import cast

from fastapi import APIRouter, Request
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from app.core.request_labels import route_template_label

metrics_router = APIRouter(tags=["metrics"])

# Route label MUST be a route template (e.g. /songs/objectreturn/topsong/{year}) or a
# fixed value, so free-form path segments cannot blow up label cardinality.

http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    labelnames=("method", "route", "status_code"),
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    labelnames=("method", "route", "status_code"),
    # LLM round trips routinely take seconds; keep the upper buckets wide.
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

llm_tokens_total = Counter(
    "llm_tokens_total",
    "Tokens reported by the chat completion provider",
    labelnames=("model", "kind"),
)


def record_llm_usage(
    *,
    model: str | None,
    prompt_tokens: int | None,
    completion_tokens: int | None,
    total_tokens: int | None,
) -> None:
    """Add provider-reported token counts to `llm_tokens_total` (missing counts are skipped)."""

    model_label = model or "unknown"
    for kind, value in (
        ("prompt", prompt_tokens),
        ("completion", completion_tokens),
        ("total", total_tokens),
    ):
        if value is not None and value >= 0:
            llm_tokens_total.labels(model=model_label, kind=kind).inc(value)


class PrometheusMetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            route_label = route_template_label(request)
            method = request.method
            code = str(int(status_code))
            duration = time.perf_counter() - started
            http_requests_total.labels(method=method, route=route_label, status_code=code).inc()
            http_request_duration_seconds.labels(
                method=method, route=route_label, status_code=code
            ).observe(duration)


@metrics_router.get("/metrics", include_in_schema=False)
def metrics() -> Response:
    # Use the default registry; sufficient for single-process usage.
    payload = generate_latest()
    return Response(content=cast(bytes, payload), media_type=CONTENT_TYPE_LATEST)
