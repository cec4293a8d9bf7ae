"""Tests for service startup wiring."""

import pytest
from httpx import ASGITransport, AsyncClient

from app import lifespan
from config import Config
from shortener.resolver import RedirectResolver
from shortener.service import RedirectAdminService
from web_app import create_app
from tests.conftest import ADMIN_PASSWORD, basic_auth


@pytest.mark.asyncio
async def test_lifespan_builds_services(logger):
    config = Config(admin_password=ADMIN_PASSWORD, store_backend="memory", root_redirect_url="https://root.example")
    app = create_app(resolver=None, service=None, config=config, logger=logger)

    async with lifespan(app):
        assert isinstance(app.state.resolver, RedirectResolver)
        assert isinstance(app.state.service, RedirectAdminService)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
            response = await client.put(
                "/admin/api/redirects/wired",
                json={"url": "https://example.com/wired"},
                headers=basic_auth(),
            )
            assert response.status_code == 200

            response = await client.get("/wired")
            assert response.status_code == 302
            assert response.headers["location"] == "https://example.com/wired"

            response = await client.get("/")
            assert response.headers["location"] == "https://root.example"
