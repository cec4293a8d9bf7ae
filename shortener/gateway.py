"""Mapping store gateway: short keys on top of the key-value store."""

import logging
from typing import List, Optional

from .errors import ReservedKeyError, ShortenerError, StoreUnavailableError
from .models import ROOT_KEY
from .store.base import KeyValueStore


class MappingStoreGateway:
    """Façade over the key-value store for short-key → URL pairs.

    Short keys are stored under ``key_prefix + key``. The root key ("") is
    reserved: it can never be written or deleted through the gateway.
    Store failures surface as ``StoreUnavailableError``; nothing is retried.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key_prefix: str = "",
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.key_prefix = key_prefix
        self.logger = logger or logging.getLogger(__name__)

    def _store_key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def _check_writable(self, key: str) -> None:
        if key == ROOT_KEY:
            raise ReservedKeyError(key)

    async def _call(self, operation: str, coro):
        try:
            return await coro
        except ShortenerError:
            raise
        except Exception as e:
            self.logger.error(f"Store {operation} failed: {e}")
            raise StoreUnavailableError(operation, f"Key-value store {operation} failed: {e}") from e

    async def list_keys(self) -> List[str]:
        """List all short keys with one store listing call.

        Returns:
            Short keys with the namespace prefix removed
        """
        result = await self._call("list", self.store.list(prefix=self.key_prefix))
        if result.cursor is not None:
            self.logger.warning("Store listing returned a cursor; remaining pages are not fetched")
        prefix_len = len(self.key_prefix)
        return [entry.name[prefix_len:] for entry in result.keys if entry.name.startswith(self.key_prefix)]

    async def get_target(self, key: str) -> Optional[str]:
        """Get the target URL for a short key, or None if absent."""
        return await self._call("get", self.store.get(self._store_key(key)))

    async def put(self, key: str, target: str) -> None:
        """Store a mapping, overwriting any existing target.

        Raises:
            ReservedKeyError: If key is the reserved root key
        """
        self._check_writable(key)
        await self._call("put", self.store.put(self._store_key(key), target))

    async def delete(self, key: str) -> None:
        """Delete a mapping. Absent keys are a no-op.

        Raises:
            ReservedKeyError: If key is the reserved root key
        """
        self._check_writable(key)
        await self._call("delete", self.store.delete(self._store_key(key)))

    async def health_check(self) -> bool:
        return await self.store.health_check()

    async def close(self) -> None:
        await self.store.close()
