"""
Secure HTTP headers middleware.

Adds security-related headers to every response. Responses carry
user data and bearer tokens, so they are also marked non-cacheable.

API responses get a CSP that allows nothing. The interactive docs
pages (only mounted when ``debug`` is on) load Swagger UI and ReDoc
from a CDN with inline bootstrap scripts, so they get a looser policy.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-XSS-Protection": "1; mode=block",
    "Cache-Control": "no-store",
}

DOCS_PATHS = frozenset({"/docs", "/docs/oauth2-redirect", "/redoc"})
DOCS_CSP = (
    "default-src 'self'; "
    "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
    "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net https://fonts.googleapis.com; "
    "font-src 'self' https://fonts.gstatic.com; "
    "img-src 'self' data: https://fastapi.tiangolo.com https://cdn.redoc.ly; "
    "worker-src 'self' blob:; "
    "frame-ancestors 'none'"
)


def headers_for(path: str) -> dict[str, str]:
    """Return the secure headers for a request path."""
    if path in DOCS_PATHS:
        return dict(SECURE_HEADERS, **{"Content-Security-Policy": DOCS_CSP})
    return SECURE_HEADERS


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for header_name, header_value in headers_for(request.url.path).items():
            response.headers.setdefault(header_name, header_value)
        return response
