"""Public redirects and the admin page."""

from .routes import router as web_router

__all__ = ["web_router"]
