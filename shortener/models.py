"""Data models for URL shortener."""

from dataclasses import dataclass, field
from typing import List, Optional, Union


# The root path maps to this key; it is never stored.
ROOT_KEY = ""


@dataclass
class Mapping:
    """A short key and the URL it redirects to."""

    key: str
    target: str


@dataclass
class KeyEntry:
    """One key returned by a store listing."""

    name: str


@dataclass
class ListResult:
    """A page of keys from a store listing.

    ``cursor`` is None when the listing is complete.
    """

    keys: List[KeyEntry] = field(default_factory=list)
    cursor: Optional[str] = None


@dataclass(frozen=True)
class Found:
    """Redirect to ``target`` with the given HTTP status."""

    target: str
    status: int = 302


@dataclass(frozen=True)
class NotFound:
    """No mapping exists for the key."""

    key: str


@dataclass(frozen=True)
class Unavailable:
    """The store could not answer the lookup."""

    key: str
    reason: str


RedirectOutcome = Union[Found, NotFound, Unavailable]
