"""Abstract base class for key-value store implementations."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import ListResult


class KeyValueStore(ABC):
    """Abstract base class for the external key-value store.

    Each operation is an independent call with store-defined consistency
    (single-key atomic, last writer wins). Implementations raise
    ``StoreUnavailableError`` when the backend cannot be reached.
    """

    @abstractmethod
    async def list(self, prefix: str = "", cursor: Optional[str] = None) -> ListResult:
        """List keys starting with a prefix.

        Args:
            prefix: Only keys starting with this string are returned
            cursor: Cursor from a previous page, or None for the first page

        Returns:
            ListResult with the key names and the next cursor (None when done)
        """
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get the value stored under a key.

        Args:
            key: The store key

        Returns:
            The value if present, None otherwise
        """
        pass

    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """Store a value, overwriting any previous one.

        Args:
            key: The store key
            value: The value to store
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete a key. Deleting an absent key is not an error.

        Args:
            key: The store key
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close store connections."""
        pass
