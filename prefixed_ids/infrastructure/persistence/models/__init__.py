"""SQLAlchemy model mixins for integer-keyed, prefixed-id entities."""

from prefixed_ids.infrastructure.persistence.models.mixins import (
    IntegerIdMixin,
    PrefixedIdMixin,
    SlugMixin,
)

__all__ = ["IntegerIdMixin", "PrefixedIdMixin", "SlugMixin"]
