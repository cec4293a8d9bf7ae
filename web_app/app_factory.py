"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shortener.errors import ShortenerError, UnauthorizedError
from .api import api_router
from .web import web_router
from .middleware.headers import ForwardedHeadersMiddleware
from .middleware.logging import LoggingMiddleware


def _register_exception_handlers(app: FastAPI) -> None:
    """Serialize shortener errors with their HTTP status."""

    @app.exception_handler(ShortenerError)
    async def shortener_error_handler(request: Request, exc: ShortenerError):
        headers = None
        if isinstance(exc, UnauthorizedError):
            realm = request.app.state.config.admin_realm
            headers = {"WWW-Authenticate": f'Basic realm="{realm}"'}
        elif exc.status_code >= 500:
            request.app.state.logger.error(
                f"{request.method} {request.url.path} failed: {exc.code} {exc.message}"
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


def create_app(
    resolver,
    service,
    config,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        resolver: Redirect resolver instance (may be set later by the lifespan)
        service: Admin service instance (may be set later by the lifespan)
        config: Configuration instance
        logger: Optional logger

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="URL Shortener",
        description="Short-key redirects backed by a key-value store",
        version="1.0.0",
        # Docs would be served outside the admin credential check
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Store instances in app state for access in routes
    app.state.resolver = resolver
    app.state.service = service
    app.state.config = config
    app.state.logger = logger or logging.getLogger("url_shortener")

    _register_exception_handlers(app)

    # Last added runs first: forwarded headers are recorded before logging
    app.add_middleware(LoggingMiddleware, logger=app.state.logger.getChild("web"))
    app.add_middleware(ForwardedHeadersMiddleware)

    app.include_router(api_router, prefix="/admin/api", tags=["Admin API"])
    app.include_router(web_router, tags=["Web"])

    return app
