"""Header parsing utilities for URL shortener."""

from typing import Dict, Optional


def normalize_path_prefix(prefix: Optional[str]) -> str:
    """Normalize a path prefix to a leading slash and no trailing slash ('' if empty)."""
    p = (prefix or "").strip().strip("/")
    return "/" + p if p else ""


def extract_forwarded_headers(headers: Dict[str, str]) -> Dict[str, Optional[str]]:
    """Extract the X-Forwarded-* headers the app uses.

    The client address feeds request logging. The prefix is set by a proxy
    that strips it before forwarding, and is normalized here, e.g. '/links'
    or '' if not set.

    Args:
        headers: Request headers dictionary

    Returns:
        Dictionary with forwarded_for and forwarded_prefix
    """
    headers_lower = {k.lower(): v for k, v in headers.items()}

    return {
        "forwarded_for": headers_lower.get("x-forwarded-for"),
        "forwarded_prefix": normalize_path_prefix(headers_lower.get("x-forwarded-prefix")),
    }
