"""Application start-up and shutdown.

Prefix registration runs in create_app() (before any request is served),
not in the lifespan, so it also holds for clients that skip lifespan events.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from prefixed_ids.application.services.prefix_registry import PrefixRegistry
from prefixed_ids.core.config import Settings
from prefixed_ids.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


def register_configured_prefixes(registry: PrefixRegistry, settings: Settings) -> None:
    """Register every ENTITY_PREFIXES entry; identical repeats are no-ops."""
    for entity_type, prefix in sorted(settings.entity_prefixes.items()):
        registry.register(entity_type, prefix)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup; dispose the SQL engine (if created) on shutdown."""
    setup_logging()
    logger.info("Identifier service started")
    yield

    from prefixed_ids.infrastructure.persistence import database

    if database.engine is not None:
        await database.engine.dispose()
