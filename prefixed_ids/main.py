"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, prefix registration, routers.
No business logic here. See prefixed_ids.core.lifespan and
prefixed_ids.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear get_settings cache) before calling create_app().
"""

from fastapi import FastAPI

from prefixed_ids.api.v1 import api_router
from prefixed_ids.application.services.prefix_registry import (
    PrefixRegistry,
    prefix_registry,
)
from prefixed_ids.core.config import get_settings
from prefixed_ids.core.exception_handlers import register_exception_handlers
from prefixed_ids.core.lifespan import create_lifespan, register_configured_prefixes


def create_app(registry: PrefixRegistry | None = None) -> FastAPI:
    """Build and return the FastAPI application.

    Args:
        registry: Prefix registry to serve; defaults to the process-wide one.
            ENTITY_PREFIXES from settings are registered into it here, before
            any request is handled.
    """
    settings = get_settings()
    registry = registry if registry is not None else prefix_registry
    register_configured_prefixes(registry, settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    app.state.prefix_registry = registry

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()
