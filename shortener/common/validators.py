"""Validation utilities for URL shortener."""

from urllib.parse import urlparse
from typing import Tuple

from ..models import ROOT_KEY


MAX_URL_LENGTH = 2048


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a target URL.

    Any well-formed absolute URL is accepted: a scheme followed by either
    an authority (``ftp://host/...``) or an opaque path (``mailto:...``).

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    if any(ch.isspace() for ch in url):
        return False, "URL cannot contain whitespace"

    try:
        result = urlparse(url)
    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"

    if not result.scheme:
        return False, "URL must be absolute (include a scheme such as https:)"

    if not result.netloc and not result.path.strip("/"):
        return False, "URL must have a host or a path after the scheme"

    return True, ""


def is_valid_key(key: str) -> Tuple[bool, str]:
    """Validate a short key.

    Keys are case-sensitive and otherwise free-form, but must be routable
    as a single path segment.

    Args:
        key: The short key to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(key, str):
        return False, "Short key must be a string"

    if key == ROOT_KEY:
        return False, "The root key is reserved"

    if "/" in key:
        return False, "Short key cannot contain '/'"

    return True, ""
