"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags.
"""

from fastapi import APIRouter

from prefixed_ids.api.v1.endpoints import health, identifiers

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    identifiers.router, prefix="/identifiers", tags=["identifiers"]
)
