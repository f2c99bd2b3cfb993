"""Domain value objects (immutable, self-validating)."""

from prefixed_ids.domain.value_objects.core import (
    EntityTypeConfig,
    IdPrefix,
    ParsedIdentifier,
)

__all__ = ["EntityTypeConfig", "IdPrefix", "ParsedIdentifier"]
