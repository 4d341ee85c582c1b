from __future__ import annotations

from starlette.requests import Request


def route_template_label(request: Request) -> str:
    """
    Route template for logs and metric labels (e.g. /songs/stringprompt/topSong/{year}).

    Raw paths are never returned; requests that matched no route get "unmatched".
    """

    route = request.scope.get("route")
    path = getattr(route, "path", None)
    if isinstance(path, str) and path:
        return path
    return "unmatched"
