"""
Origin policy and response envelope for browser callers.

Only one origin is allowed to read responses. Everyone else still gets an
answer, just without CORS headers, so the browser blocks the read.
"""
from typing import Dict, Optional

from starlette.responses import Response, StreamingResponse

from kanaedge.core.config import settings


def is_allowed_origin(origin: Optional[str]) -> bool:
    return origin is not None and origin == settings.ALLOWED_ORIGIN


def cors_headers(origin: Optional[str]) -> Dict[str, str]:
    if not is_allowed_origin(origin):
        return {}
    return {
        "Access-Control-Allow-Origin": settings.ALLOWED_ORIGIN,
        "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type, Authorization",
        "Access-Control-Max-Age": "86400",
        "Vary": "Origin",
    }


def preflight_response(origin: Optional[str]) -> Response:
    """Answer an OPTIONS request: 403 for unknown origins, 204 with CORS headers otherwise."""
    if not is_allowed_origin(origin):
        return Response("Forbidden", status_code=403, media_type="text/plain")
    return Response(status_code=204, headers=cors_headers(origin))


def attach_cors(response: Response, origin: Optional[str]) -> Response:
    """
    Return a copy of `response` with the CORS headers for `origin` merged in.
    Status, body and existing headers are carried over unchanged; streamed
    bodies stay streamed.
    """
    body_iterator = getattr(response, "body_iterator", None)
    background = getattr(response, "background", None)
    if body_iterator is not None:
        wrapped: Response = StreamingResponse(
            body_iterator, status_code=response.status_code, background=background
        )
    else:
        wrapped = Response(response.body, status_code=response.status_code, background=background)
    wrapped.raw_headers = list(response.raw_headers)
    wrapped.headers.update(cors_headers(origin))
    return wrapped
