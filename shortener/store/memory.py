"""In-process key-value store for development and tests."""

import asyncio
import logging
from typing import Dict, Optional

from .base import KeyValueStore
from ..models import KeyEntry, ListResult


class InMemoryKeyValueStore(KeyValueStore):
    """Dictionary-backed store. Contents are lost when the process exits."""

    def __init__(
        self,
        initial: Optional[Dict[str, str]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = asyncio.Lock()

    async def list(self, prefix: str = "", cursor: Optional[str] = None) -> ListResult:
        async with self._lock:
            names = sorted(k for k in self._data if k.startswith(prefix))
        return ListResult(keys=[KeyEntry(name=n) for n in names], cursor=None)

    async def get(self, key: str) -> Optional[str]:
        async with self._lock:
            return self._data.get(key)

    async def put(self, key: str, value: str) -> None:
        async with self._lock:
            self._data[key] = value

    async def delete(self, key: str) -> None:
        async with self._lock:
            self._data.pop(key, None)

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        self.logger.debug("In-memory store closed")
