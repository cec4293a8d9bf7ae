"""Common utilities for URL shortener."""

from .validators import is_valid_url, is_valid_key
from .headers import extract_forwarded_headers, normalize_path_prefix
from .logging_config import setup_logging, get_logger

__all__ = [
    "is_valid_url",
    "is_valid_key",
    "extract_forwarded_headers",
    "normalize_path_prefix",
    "setup_logging",
    "get_logger",
]
