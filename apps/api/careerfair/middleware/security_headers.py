from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from careerfair.core.config import settings

# JSON-only API: nothing here is meant to be framed or sniffed.
_BASELINE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
}

_HSTS = "max-age=63072000; includeSubDomains"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        response: Response = await call_next(request)
        if not settings.security_headers_enabled:
            return response

        for name, value in _BASELINE_HEADERS.items():
            response.headers.setdefault(name, value)

        # Fair payloads can carry invite codes; keep them out of shared caches.
        if request.url.path.startswith("/api/"):
            response.headers.setdefault("Cache-Control", "no-store")

        if settings.env != "local":
            response.headers.setdefault("Strict-Transport-Security", _HSTS)

        return response
