"""API v1."""

from prefixed_ids.api.v1.router import api_router

__all__ = ["api_router"]
