"""Redirect resolution for short keys."""

import logging
from typing import Optional

from .errors import StoreUnavailableError
from .gateway import MappingStoreGateway
from .models import ROOT_KEY, Found, NotFound, RedirectOutcome, Unavailable


class RedirectResolver:
    """Turns a short key into a redirect decision.

    Per-key redirects are temporary (302) so mappings stay editable. The
    root path is operator configuration: it always redirects permanently
    (301) to ``root_redirect_url`` and is never looked up in the store.
    """

    def __init__(
        self,
        gateway: MappingStoreGateway,
        root_redirect_url: str,
        logger: Optional[logging.Logger] = None,
    ):
        self.gateway = gateway
        self.root_redirect_url = root_redirect_url
        self.logger = logger or logging.getLogger(__name__)

    async def resolve(self, key: str) -> RedirectOutcome:
        """Resolve a short key.

        Args:
            key: The path segment as received ("" for the root path)

        Returns:
            Found, NotFound or Unavailable
        """
        if key == ROOT_KEY:
            return Found(target=self.root_redirect_url, status=301)

        try:
            target = await self.gateway.get_target(key)
        except StoreUnavailableError as e:
            self.logger.error(f"Cannot resolve '{key}': {e.message}")
            return Unavailable(key=key, reason=e.message)

        if target is None:
            self.logger.warning(f"Short key not found: {key}")
            return NotFound(key=key)

        self.logger.debug(f"Resolved {key} -> {target}")
        return Found(target=target, status=302)
