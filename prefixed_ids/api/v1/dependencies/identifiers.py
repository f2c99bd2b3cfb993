"""Identifier dependencies: registry, codec, resolver, and entity-from-param (composition root)."""

from collections.abc import Awaitable, Callable
from typing import Annotated, Any

from fastapi import Depends, Path, Request

from prefixed_ids.application.interfaces.repositories import IEntityRepository
from prefixed_ids.application.services.codec import IdentifierCodec, get_codec
from prefixed_ids.application.services.prefix_registry import PrefixRegistry
from prefixed_ids.application.services.resolver import PrefixedIdResolver
from prefixed_ids.application.services.strategies import build_lookup
from prefixed_ids.domain.exceptions import EntityTypeNotRegisteredException


def get_prefix_registry(request: Request) -> PrefixRegistry:
    """Registry wired by create_app()."""
    return request.app.state.prefix_registry


def get_identifier_codec() -> IdentifierCodec:
    """Process-wide codec."""
    return get_codec()


def get_resolver(
    entity_type: Annotated[str, Path(min_length=1)],
    registry: Annotated[PrefixRegistry, Depends(get_prefix_registry)],
    codec: Annotated[IdentifierCodec, Depends(get_identifier_codec)],
) -> PrefixedIdResolver:
    """Resolver for the {entity_type} path segment; 404 when the type is unknown."""
    if entity_type not in registry:
        raise EntityTypeNotRegisteredException(entity_type)
    return PrefixedIdResolver(entity_type, codec=codec, registry=registry)


def entity_from_param(
    entity_type: str,
    repository_dependency: Callable[..., Any],
) -> Callable[..., Awaitable[Any]]:
    """Build a dependency that resolves the {param} path segment to an entity.

    Slug first (when the repository supports it), then prefixed id / legacy
    key. Raises RecordNotFoundException (404) when nothing matches.

    Usage:
        get_product = entity_from_param("Product", get_product_repo)

        @router.get("/products/{param}")
        async def show(product: Annotated[Product, Depends(get_product)]): ...
    """

    async def _dependency(
        param: Annotated[str, Path()],
        repository: Annotated[IEntityRepository, Depends(repository_dependency)],
        registry: Annotated[PrefixRegistry, Depends(get_prefix_registry)],
        codec: Annotated[IdentifierCodec, Depends(get_identifier_codec)],
    ) -> Any:
        resolver = PrefixedIdResolver(
            entity_type, repository, codec=codec, registry=registry
        )
        lookup = build_lookup(entity_type, repository, resolver)
        return await lookup.find_by_param_or_fail(param)

    return _dependency
