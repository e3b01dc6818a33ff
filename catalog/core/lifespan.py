"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (cache, pattern
invalidator, schema creation, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from catalog.application.services.invalidation import PatternInvalidator
from catalog.core.config import get_settings
from catalog.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, Redis cache (if enabled), pattern invalidator,
    schema (if create_schema_on_startup). Shutdown order: drain pending
    invalidations, cache close, SQL engine dispose.
    """
    settings = get_settings()
    setup_logging(settings)

    # ---- Startup ----
    if settings.redis_enabled:
        from catalog.infrastructure.cache.redis_cache import RedisCache

        cache = RedisCache(settings=settings)
        # A failed connect leaves the cache unavailable; requests go to the database.
        await cache.connect()
        app.state.cache = cache
    else:
        app.state.cache = None
        logger.info("Redis cache disabled")

    app.state.invalidator = PatternInvalidator(app.state.cache)

    if settings.create_schema_on_startup:
        from catalog.infrastructure.persistence.database import create_schema

        await create_schema()

    yield

    # ---- Shutdown ----
    await app.state.invalidator.drain(settings.invalidation_drain_timeout)

    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.close()
        app.state.cache = None
        logger.info("Cache closed")

    from catalog.infrastructure.persistence import database

    await database.dispose_engine()
