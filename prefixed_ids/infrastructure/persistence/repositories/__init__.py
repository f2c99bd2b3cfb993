"""Repositories for integer-keyed entities."""

from prefixed_ids.infrastructure.persistence.repositories.base import (
    BaseRepository,
    SluggedRepository,
)

__all__ = ["BaseRepository", "SluggedRepository"]
