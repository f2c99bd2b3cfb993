"""Ordered identifier resolution strategies.

A lookup tries each strategy in turn and returns the first entity found.
Slugs take precedence over prefixed ids for entity types that have them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from prefixed_ids.application.interfaces.repositories import (
    IEntityRepository,
    ISlugRepository,
)
from prefixed_ids.application.interfaces.services import IIdentifierStrategy
from prefixed_ids.application.services.resolver import PrefixedIdResolver
from prefixed_ids.domain.exceptions import RecordNotFoundException


class SlugStrategy:
    """Find by slug through the repository."""

    def __init__(self, repository: ISlugRepository) -> None:
        self.repository = repository

    async def find(self, raw: str) -> Any | None:
        return await self.repository.get_by_slug(raw)


class PrefixedIdStrategy:
    """Find by prefixed id, bare body, or legacy integer key."""

    def __init__(self, resolver: PrefixedIdResolver) -> None:
        self.resolver = resolver

    async def find(self, raw: str) -> Any | None:
        return await self.resolver.resolve_entity(raw)


class IdentifierLookup:
    """Resolve URL params for one entity type using strategies in priority order."""

    def __init__(
        self, entity_type: str, strategies: Sequence[IIdentifierStrategy]
    ) -> None:
        if not strategies:
            raise ValueError("IdentifierLookup needs at least one strategy")
        self.entity_type = entity_type
        self.strategies = tuple(strategies)

    async def find_by_param(self, raw: str | None) -> Any | None:
        """Return the first entity any strategy finds, or None (blank raw included)."""
        if raw is None or not raw.strip():
            return None
        for strategy in self.strategies:
            entity = await strategy.find(raw)
            if entity is not None:
                return entity
        return None

    async def find_by_param_or_fail(self, raw: str | None) -> Any:
        """Like find_by_param but raise RecordNotFoundException when nothing matches."""
        entity = await self.find_by_param(raw)
        if entity is None:
            raise RecordNotFoundException(self.entity_type, raw or "")
        return entity


def build_lookup(
    entity_type: str,
    repository: IEntityRepository,
    resolver: PrefixedIdResolver | None = None,
) -> IdentifierLookup:
    """Build the default lookup: slug first (when supported), then prefixed id."""
    resolver = resolver or PrefixedIdResolver(entity_type, repository)
    strategies: list[IIdentifierStrategy] = []
    if isinstance(repository, ISlugRepository):
        strategies.append(SlugStrategy(repository))
    strategies.append(PrefixedIdStrategy(resolver))
    return IdentifierLookup(entity_type, strategies)
