"""Core business logic for URL shortener."""

from .gateway import MappingStoreGateway
from .resolver import RedirectResolver
from .service import RedirectAdminService

__all__ = ["MappingStoreGateway", "RedirectResolver", "RedirectAdminService"]
