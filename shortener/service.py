"""Admin operations for URL shortener."""

import asyncio
import logging
from typing import Dict, Optional

from .common.validators import is_valid_key, is_valid_url
from .errors import BadRequestError, ReservedKeyError
from .gateway import MappingStoreGateway
from .models import ROOT_KEY, Mapping


class RedirectAdminService:
    """Service layer for listing, creating and deleting mappings."""

    def __init__(
        self,
        gateway: MappingStoreGateway,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize admin service.

        Args:
            gateway: Mapping store gateway
            logger: Optional logger
        """
        self.gateway = gateway
        self.logger = logger or logging.getLogger(__name__)

    async def list_all(self) -> Dict[str, str]:
        """List every mapping.

        Keys are enumerated once, then all targets are fetched concurrently.
        A failed lookup fails the whole listing. Keys deleted between the
        enumeration and the lookup are left out.

        Returns:
            Dictionary of short key -> target URL

        Raises:
            StoreUnavailableError: If the listing or any lookup fails
        """
        keys = await self.gateway.list_keys()
        targets = await asyncio.gather(*(self.gateway.get_target(k) for k in keys))

        mappings = {k: t for k, t in zip(keys, targets) if t is not None}
        self.logger.debug(f"Listed {len(mappings)} mappings")
        return mappings

    async def upsert(self, key: str, target: str) -> Mapping:
        """Create or overwrite a mapping.

        Args:
            key: Short key
            target: Target URL

        Returns:
            The stored mapping

        Raises:
            BadRequestError: If the key or URL is invalid
            StoreUnavailableError: If the store write fails
        """
        if key == ROOT_KEY:
            raise ReservedKeyError(key)

        is_valid, error = is_valid_key(key)
        if not is_valid:
            raise BadRequestError(f"Invalid short key: {error}", code="INVALID_KEY", details={"key": key})

        is_valid, error = is_valid_url(target)
        if not is_valid:
            raise BadRequestError(f"Invalid URL: {error}", code="INVALID_URL", details={"url": target})

        await self.gateway.put(key, target)
        self.logger.info(f"Saved mapping: {key} -> {target}")
        return Mapping(key=key, target=target)

    async def remove(self, key: str) -> None:
        """Delete a mapping. Removing an absent key succeeds.

        Raises:
            ReservedKeyError: If key is the root key
            StoreUnavailableError: If the store delete fails
        """
        await self.gateway.delete(key)
        self.logger.info(f"Deleted mapping: {key}")

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        store_healthy = await self.gateway.health_check()
        return {
            "store": store_healthy,
            "overall": store_healthy,
        }

    async def close(self) -> None:
        """Close store connections."""
        await self.gateway.close()
