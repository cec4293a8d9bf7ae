#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Serves public short-key redirects and the password-protected admin UI/API.
Mappings live in an external key-value store (Redis), or in process memory
for local development.

Usage:
    python app.py

Environment variables:
    ADMIN_USERNAME - Admin basic-auth username
    ADMIN_PASSWORD - Admin basic-auth password (admin disabled when unset)
    ROOT_REDIRECT_URL - Permanent redirect target for /
    STORE_BACKEND - 'memory' or 'redis'
    REDIS_URL - Redis connection URL
    KEY_PREFIX - Namespace for keys in the store
    PORT - Port to listen on
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from shortener.gateway import MappingStoreGateway
from shortener.resolver import RedirectResolver
from shortener.service import RedirectAdminService
from shortener.store import create_store
from shortener.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting URL shortener service...")

    if config.store_backend == "redis":
        logger.info(f"Connecting to Redis at {config.redis_url}")
    else:
        logger.warning("Using in-memory store; mappings are lost on restart")
    store = create_store(config, logger=logger)

    gateway = MappingStoreGateway(store, key_prefix=config.key_prefix, logger=logger)
    if not await gateway.health_check():
        logger.warning("Key-value store is not reachable yet; requests will fail until it is")

    if not config.admin_password:
        logger.warning("ADMIN_PASSWORD is not set; the admin UI and API will reject all requests")

    app.state.resolver = RedirectResolver(
        gateway,
        root_redirect_url=config.root_redirect_url,
        logger=logger,
    )
    app.state.service = RedirectAdminService(gateway, logger=logger)

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down URL shortener service...")
    await app.state.service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump_safe()}")

    # Resolver and service are built in the lifespan
    app = create_app(
        resolver=None,
        service=None,
        config=config,
        logger=logger,
    )
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
