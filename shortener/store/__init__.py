"""Key-value store layer for URL shortener."""

import logging
from typing import Optional

from .base import KeyValueStore
from .memory import InMemoryKeyValueStore
from .redis_store import RedisKeyValueStore


def create_store(config, logger: Optional[logging.Logger] = None) -> KeyValueStore:
    """Build the store selected by ``config.store_backend``.

    Args:
        config: Configuration instance
        logger: Optional logger

    Returns:
        A KeyValueStore implementation
    """
    if config.store_backend == "redis":
        return RedisKeyValueStore(
            redis_url=config.redis_url,
            timeout_seconds=config.store_timeout_seconds,
            logger=logger,
        )
    if config.store_backend == "memory":
        return InMemoryKeyValueStore(logger=logger)
    raise ValueError(f"Unknown store backend: {config.store_backend}")


__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "RedisKeyValueStore",
    "create_store",
]
