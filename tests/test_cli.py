"""Tests for the admin CLI."""

import json

import pytest

from shortener.cli import main
from shortener.store.memory import InMemoryKeyValueStore
from tests.conftest import FailingKeyValueStore, ROOT_URL


@pytest.fixture
def cli_store():
    return InMemoryKeyValueStore()


@pytest.mark.asyncio
class TestCLI:
    """Run CLI commands against an in-memory store."""

    async def test_set_get_list_delete(self, config, cli_store, capsys):
        assert await main(["set", "docs", "https://example.com/docs"], config=config, store=cli_store) == 0
        out = json.loads(capsys.readouterr().out)
        assert out == {"success": True, "key": "docs", "url": "https://example.com/docs"}

        assert await main(["get", "docs"], config=config, store=cli_store) == 0
        assert json.loads(capsys.readouterr().out)["url"] == "https://example.com/docs"

        assert await main(["list"], config=config, store=cli_store) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["count"] == 1
        assert out["redirects"] == {"docs": "https://example.com/docs"}

        assert await main(["delete", "docs"], config=config, store=cli_store) == 0
        capsys.readouterr()

        assert await main(["get", "docs"], config=config, store=cli_store) == 1
        assert "not found" in json.loads(capsys.readouterr().err)["error"]

    async def test_set_invalid_url(self, config, cli_store, capsys):
        assert await main(["set", "bad", "nope"], config=config, store=cli_store) == 1

        err = json.loads(capsys.readouterr().err)
        assert err["success"] is False
        assert "Invalid URL" in err["error"]

    async def test_resolve(self, config, cli_store, capsys):
        await main(["set", "k", "https://example.com/k"], config=config, store=cli_store)
        capsys.readouterr()

        assert await main(["resolve", "k"], config=config, store=cli_store) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["status"] == 302
        assert out["location"] == "https://example.com/k"

        assert await main(["resolve", ""], config=config, store=cli_store) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["status"] == 301
        assert out["location"] == ROOT_URL

    async def test_store_down(self, config, capsys):
        assert await main(["list"], config=config, store=FailingKeyValueStore()) == 1

        assert "failed" in json.loads(capsys.readouterr().err)["error"]

    async def test_health(self, config, cli_store, capsys):
        assert await main(["health"], config=config, store=cli_store) == 0
        assert json.loads(capsys.readouterr().out)["health"]["overall"] is True

    async def test_no_command(self, config, capsys):
        assert await main([], config=config) == 1
