"""
Command-line interface for managing short links directly in the store.

Usage:
    shortener-admin list
    shortener-admin get <key>
    shortener-admin set <key> <url>
    shortener-admin delete <key>
    shortener-admin resolve <key>
    shortener-admin health
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from config import Config, load_config
from .common.logging_config import setup_logging
from .errors import ShortenerError
from .gateway import MappingStoreGateway
from .models import Found, NotFound
from .resolver import RedirectResolver
from .service import RedirectAdminService
from .store import create_store


def _print_ok(payload: dict) -> int:
    print(json.dumps({"success": True, **payload}, indent=2))
    return 0


def _print_error(message: str) -> int:
    print(json.dumps({"success": False, "error": message}, indent=2), file=sys.stderr)
    return 1


class ShortenerCLI:
    """Command-line interface for URL shortener."""

    def __init__(self, config: Config, verbose: bool = False, store=None):
        self.config = config
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING", stream=sys.stderr)
        self.gateway = MappingStoreGateway(
            store or create_store(config, logger=self.logger),
            key_prefix=config.key_prefix,
            logger=self.logger,
        )
        self.service = RedirectAdminService(self.gateway, logger=self.logger)
        self.resolver = RedirectResolver(
            self.gateway,
            root_redirect_url=config.root_redirect_url,
            logger=self.logger,
        )

    async def cleanup(self):
        await self.service.close()

    async def list_mappings(self) -> int:
        mappings = await self.service.list_all()
        return _print_ok({"count": len(mappings), "redirects": mappings})

    async def get(self, key: str) -> int:
        target = await self.gateway.get_target(key)
        if target is None:
            return _print_error(f"Short key '{key}' not found")
        return _print_ok({"key": key, "url": target})

    async def set(self, key: str, url: str) -> int:
        mapping = await self.service.upsert(key, url)
        return _print_ok({"key": mapping.key, "url": mapping.target})

    async def delete(self, key: str) -> int:
        await self.service.remove(key)
        return _print_ok({"key": key})

    async def resolve(self, key: str) -> int:
        outcome = await self.resolver.resolve(key)
        if isinstance(outcome, Found):
            return _print_ok({"key": key, "location": outcome.target, "status": outcome.status})
        if isinstance(outcome, NotFound):
            return _print_error(f"Short key '{key}' not found")
        return _print_error(f"Store unavailable: {outcome.reason}")

    async def health(self) -> int:
        health_status = await self.service.health_check()
        print(json.dumps({"success": health_status["overall"], "health": health_status}, indent=2))
        return 0 if health_status["overall"] else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shortener-admin",
        description="Manage URL shortener mappings in the configured key-value store",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Point /docs at a URL
  %(prog)s set docs https://example.com/documentation

  # Show every mapping
  %(prog)s list

  # Remove a mapping
  %(prog)s delete docs
        """
    )

    parser.add_argument(
        "--redis-url",
        help="Redis connection URL (selects the redis backend; default: from REDIS_URL/STORE_BACKEND env)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("list", help="List all mappings")

    get_parser = subparsers.add_parser("get", help="Show the target of a short key")
    get_parser.add_argument("key", help="Short key")

    set_parser = subparsers.add_parser("set", help="Create or overwrite a mapping")
    set_parser.add_argument("key", help="Short key")
    set_parser.add_argument("url", help="Target URL")

    delete_parser = subparsers.add_parser("delete", help="Delete a mapping")
    delete_parser.add_argument("key", help="Short key")

    resolve_parser = subparsers.add_parser("resolve", help="Show the redirect a short key produces")
    resolve_parser.add_argument("key", help="Short key ('' for the root path)")

    subparsers.add_parser("health", help="Check store health")

    return parser


async def main(argv: Optional[List[str]] = None, config: Optional[Config] = None, store=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = config or load_config()
    if args.redis_url:
        config = config.model_copy(update={"store_backend": "redis", "redis_url": args.redis_url})

    cli = ShortenerCLI(config, verbose=args.verbose, store=store)

    try:
        if args.command == "list":
            return await cli.list_mappings()
        elif args.command == "get":
            return await cli.get(args.key)
        elif args.command == "set":
            return await cli.set(args.key, args.url)
        elif args.command == "delete":
            return await cli.delete(args.key)
        elif args.command == "resolve":
            return await cli.resolve(args.key)
        elif args.command == "health":
            return await cli.health()
        else:
            parser.print_help()
            return 1
    except ShortenerError as e:
        return _print_error(e.message)
    finally:
        await cli.cleanup()


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
