"""FastAPI dependencies (composition root)."""

from prefixed_ids.api.v1.dependencies.identifiers import (
    entity_from_param,
    get_identifier_codec,
    get_prefix_registry,
    get_resolver,
)

__all__ = [
    "entity_from_param",
    "get_identifier_codec",
    "get_prefix_registry",
    "get_resolver",
]
