"""
Exception classes for the URL shortener.

Every error carries the HTTP status it maps to, so the web layer can
serialize any of them with a single exception handler.
"""

from typing import Any, Dict, Optional
from datetime import datetime, timezone


class ShortenerError(Exception):
    """
    Base exception for all URL shortener errors.

    Attributes:
        code: Error code (e.g., "KEY_NOT_FOUND")
        message: Human-readable message
        status_code: HTTP status code
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp,
            }
        }


class NotFoundError(ShortenerError):
    """Short key not found (404)."""

    def __init__(self, key: str):
        super().__init__(
            code="KEY_NOT_FOUND",
            message=f"Short key '{key}' not found",
            status_code=404,
            details={"key": key},
        )


class UnauthorizedError(ShortenerError):
    """Missing or incorrect admin credentials (401)."""

    def __init__(self, message: str = "Invalid admin credentials"):
        super().__init__(
            code="UNAUTHORIZED",
            message=message,
            status_code=401,
        )


class BadRequestError(ShortenerError):
    """Malformed request body or invalid field (400)."""

    def __init__(
        self,
        message: str,
        code: str = "BAD_REQUEST",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=400,
            details=details,
        )


class ReservedKeyError(BadRequestError):
    """Attempt to store or delete a reserved key (400)."""

    def __init__(self, key: str):
        super().__init__(
            message=f"Short key '{key}' is reserved",
            code="RESERVED_KEY",
            details={"key": key},
        )


class StoreUnavailableError(ShortenerError):
    """Key-value store call failed (503)."""

    def __init__(self, operation: str, message: str):
        super().__init__(
            code="STORE_UNAVAILABLE",
            message=message,
            status_code=503,
            details={"operation": operation},
        )
        self.operation = operation
