"""Redis implementation of the key-value store."""

import logging
from typing import List, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from .base import KeyValueStore
from ..errors import StoreUnavailableError
from ..models import KeyEntry, ListResult


# Characters with special meaning in a SCAN MATCH pattern.
_GLOB_SPECIAL = "\\*?[]"


def escape_match_pattern(prefix: str) -> str:
    """Escape glob metacharacters so a prefix matches literally in SCAN MATCH."""
    return "".join("\\" + ch if ch in _GLOB_SPECIAL else ch for ch in prefix)


class RedisKeyValueStore(KeyValueStore):
    """Key-value store backed by Redis strings."""

    def __init__(
        self,
        redis_url: str,
        timeout_seconds: float = 5.0,
        scan_count: int = 500,
        client: Optional[redis.Redis] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize Redis store.

        Args:
            redis_url: Redis connection URL (e.g., redis://localhost:6379/0)
            timeout_seconds: Socket connect and read timeout
            scan_count: COUNT hint passed to SCAN
            client: Optional pre-built client (used instead of redis_url)
            logger: Optional logger instance
        """
        self.redis_url = redis_url
        self.timeout_seconds = timeout_seconds
        self.scan_count = scan_count
        self.logger = logger or logging.getLogger(__name__)
        self.client = client or redis.from_url(
            redis_url,
            encoding="utf-8",
            decode_responses=True,
            socket_timeout=timeout_seconds,
            socket_connect_timeout=timeout_seconds,
        )

    def _unavailable(self, operation: str, error: Exception) -> StoreUnavailableError:
        self.logger.error(f"Redis {operation} failed: {error}")
        return StoreUnavailableError(operation, f"Key-value store {operation} failed: {error}")

    async def list(self, prefix: str = "", cursor: Optional[str] = None) -> ListResult:
        """List keys by walking SCAN to completion.

        The cursor argument is accepted for interface compatibility; the
        whole key space is always returned in one page.
        """
        names: List[str] = []
        try:
            async for name in self.client.scan_iter(
                match=escape_match_pattern(prefix) + "*",
                count=self.scan_count,
            ):
                names.append(name)
        except (RedisError, OSError) as e:
            raise self._unavailable("list", e) from e

        # SCAN may return a key more than once
        unique = sorted(set(names))
        return ListResult(keys=[KeyEntry(name=n) for n in unique], cursor=None)

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self.client.get(key)
        except (RedisError, OSError) as e:
            raise self._unavailable("get", e) from e

    async def put(self, key: str, value: str) -> None:
        try:
            await self.client.set(key, value)
        except (RedisError, OSError) as e:
            raise self._unavailable("put", e) from e

    async def delete(self, key: str) -> None:
        try:
            await self.client.delete(key)
        except (RedisError, OSError) as e:
            raise self._unavailable("delete", e) from e

    async def health_check(self) -> bool:
        try:
            return bool(await self.client.ping())
        except (RedisError, OSError) as e:
            self.logger.error(f"Health check failed: {e}")
            return False

    async def close(self) -> None:
        """Close Redis connection."""
        await self.client.aclose()
        self.logger.info("Redis connection closed")
