"""Ports (Protocols) consumed by the application layer."""

from prefixed_ids.application.interfaces.repositories import (
    IEntityRepository,
    ISlugRepository,
)
from prefixed_ids.application.interfaces.services import (
    IIdentifierCodec,
    IIdentifierStrategy,
)

__all__ = [
    "IEntityRepository",
    "ISlugRepository",
    "IIdentifierCodec",
    "IIdentifierStrategy",
]
