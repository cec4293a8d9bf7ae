"""Pytest configuration and fixtures."""

import base64
from typing import AsyncGenerator, Optional

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from shortener.common.logging_config import setup_logging
from shortener.gateway import MappingStoreGateway
from shortener.models import ListResult
from shortener.resolver import RedirectResolver
from shortener.service import RedirectAdminService
from shortener.store.base import KeyValueStore
from shortener.store.memory import InMemoryKeyValueStore
from web_app import create_app

ADMIN_USER = "admin"
ADMIN_PASSWORD = "s3cret-pass"
ROOT_URL = "https://operator.example.org"


class FailingKeyValueStore(KeyValueStore):
    """Store double whose selected operations raise ConnectionError."""

    def __init__(self, inner: Optional[KeyValueStore] = None, fail_on=("list", "get", "put", "delete")):
        self.inner = inner or InMemoryKeyValueStore()
        self.fail_on = set(fail_on)
        self.calls = []

    def _maybe_fail(self, operation: str):
        self.calls.append(operation)
        if operation in self.fail_on:
            raise ConnectionError(f"store {operation} timed out")

    async def list(self, prefix: str = "", cursor: Optional[str] = None) -> ListResult:
        self._maybe_fail("list")
        return await self.inner.list(prefix, cursor)

    async def get(self, key: str) -> Optional[str]:
        self._maybe_fail("get")
        return await self.inner.get(key)

    async def put(self, key: str, value: str) -> None:
        self._maybe_fail("put")
        await self.inner.put(key, value)

    async def delete(self, key: str) -> None:
        self._maybe_fail("delete")
        await self.inner.delete(key)

    async def health_check(self) -> bool:
        return not self.fail_on

    async def close(self) -> None:
        await self.inner.close()


def basic_auth(username: str = ADMIN_USER, password: str = ADMIN_PASSWORD) -> dict:
    """Authorization header for HTTP basic auth."""
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def config():
    """Configuration with known admin credentials."""
    return Config(
        admin_username=ADMIN_USER,
        admin_password=ADMIN_PASSWORD,
        root_redirect_url=ROOT_URL,
        store_backend="memory",
        key_prefix="redirect:",
    )


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def gateway(store, config, logger) -> MappingStoreGateway:
    return MappingStoreGateway(store, key_prefix=config.key_prefix, logger=logger)


@pytest.fixture
def resolver(gateway, config, logger) -> RedirectResolver:
    return RedirectResolver(gateway, root_redirect_url=config.root_redirect_url, logger=logger)


@pytest.fixture
def service(gateway, logger) -> RedirectAdminService:
    return RedirectAdminService(gateway, logger=logger)


@pytest.fixture
def app(resolver, service, config, logger):
    """Create test FastAPI app."""
    return create_app(
        resolver=resolver,
        service=service,
        config=config,
        logger=logger,
    )


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def admin_headers():
    return basic_auth()


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
