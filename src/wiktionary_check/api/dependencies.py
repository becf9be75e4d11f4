"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from typing import Annotated

import structlog
from fastapi import Depends, FastAPI, Request

from wiktionary_check.config import Settings, get_settings
from wiktionary_check.entities import PipelineConfig
from wiktionary_check.handlers import WordHandler
from wiktionary_check.logger import configure_logging
from wiktionary_check.protocols import WordLookupClient
from wiktionary_check.repositories import WiktionaryClient
from wiktionary_check.services import LookupService

logger = structlog.get_logger(__name__)


def get_handler(request: Request) -> WordHandler:
    """Dependency injection for WordHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "word_handler", None)
    if handler is None:
        raise RuntimeError("WordHandler not initialized. Check lifespan setup.")
    return handler


def build_lookup_client(settings: Settings) -> WordLookupClient:
    """Create the upstream client described by the settings."""
    return WiktionaryClient.create(
        api_url=settings.wiktionary_api_url,
        user_agent=settings.wiktionary_user_agent,
        timeout=settings.http_timeout,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Upstream client - app.state.lookup_client if preset, else WiktionaryClient
    2. Service (cache + queue) - stored in app.state.lookup_service
    3. Handler (HTTP endpoints) - stored in app.state.word_handler

    Cleanup:
        Stops the cache sweeper, cancels queued lookups, closes the client
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    configure_logging(settings.log_level, settings.log_json)

    client = getattr(app.state, "lookup_client", None) or build_lookup_client(settings)
    config = PipelineConfig.from_settings(settings)

    lookup_service = LookupService.create(client=client, config=config)
    lookup_service.start()

    app.state.lookup_service = lookup_service
    app.state.word_handler = WordHandler(lookup_service=lookup_service)

    logger.info(
        "lookup_service_started",
        request_delay=config.request_delay,
        max_retries=config.max_retries,
        retry_delay=config.retry_delay,
        cache_lifetime=config.cache_lifetime,
    )

    try:
        yield
    finally:
        await lookup_service.close()
        del app.state.word_handler
        del app.state.lookup_service
        logger.info("lookup_service_stopped")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[WordHandler, Depends(get_handler)]
