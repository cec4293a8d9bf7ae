"""Forwarded headers middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from shortener.common.headers import extract_forwarded_headers


class ForwardedHeadersMiddleware(BaseHTTPMiddleware):
    """Store the client address and path prefix from X-Forwarded-* on request.state."""

    async def dispatch(self, request: Request, call_next: Callable):
        forwarded = extract_forwarded_headers(dict(request.headers))
        request.state.forwarded_for = forwarded["forwarded_for"]
        request.state.forwarded_prefix = forwarded["forwarded_prefix"]

        return await call_next(request)
