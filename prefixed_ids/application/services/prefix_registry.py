"""Prefix registry: entity type -> optional identifier prefix.

Registration happens once per entity type at start-up (model definition or
application factory). After that the mapping is only read, so reads take no
lock; writes are serialized.

Policy: first registration wins. Registering the same entity type again with
the same prefix is a no-op; a different prefix, or a prefix owned by another
entity type, raises PrefixAlreadyRegisteredException.
"""

from __future__ import annotations

import threading

from prefixed_ids.domain.exceptions import (
    PrefixAlreadyRegisteredException,
    ValidationException,
)
from prefixed_ids.domain.value_objects import EntityTypeConfig, IdPrefix
from prefixed_ids.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class PrefixRegistry:
    """Read-mostly mapping of entity type to EntityTypeConfig."""

    def __init__(self) -> None:
        self._configs: dict[str, EntityTypeConfig] = {}
        self._owners: dict[str, str] = {}
        self._lock = threading.Lock()

    def register(self, entity_type: str, prefix: str | None) -> EntityTypeConfig:
        """Register entity_type with prefix (None for no prefix).

        Returns:
            The stored EntityTypeConfig (existing one on an identical repeat).

        Raises:
            ValidationException: If entity_type or prefix is malformed.
            PrefixAlreadyRegisteredException: If entity_type is registered with
                another prefix or prefix belongs to another entity type.
        """
        try:
            config = EntityTypeConfig(
                entity_type=entity_type,
                prefix=IdPrefix(prefix) if prefix is not None else None,
            )
        except ValueError as e:
            raise ValidationException(str(e), field="prefix") from e

        with self._lock:
            existing = self._configs.get(entity_type)
            if existing is not None:
                if existing == config:
                    return existing
                raise PrefixAlreadyRegisteredException(
                    entity_type, prefix, existing.prefix_value
                )
            if prefix is not None:
                owner = self._owners.get(prefix)
                if owner is not None:
                    raise PrefixAlreadyRegisteredException(entity_type, prefix, owner)
                self._owners[prefix] = entity_type
            self._configs[entity_type] = config

        logger.info("Registered identifier prefix %r for %s", prefix, entity_type)
        return config

    def config_for(self, entity_type: str) -> EntityTypeConfig | None:
        return self._configs.get(entity_type)

    def prefix_of(self, entity_type: str) -> str | None:
        """Return the prefix registered for entity_type, or None."""
        config = self._configs.get(entity_type)
        return config.prefix_value if config else None

    def entity_type_for(self, prefix: str) -> str | None:
        """Return the entity type that owns prefix, or None."""
        return self._owners.get(prefix)

    def clear(self) -> None:
        """Drop all registrations. Intended for tests only."""
        with self._lock:
            self._configs.clear()
            self._owners.clear()

    def __contains__(self, entity_type: object) -> bool:
        return entity_type in self._configs

    def __len__(self) -> int:
        return len(self._configs)


# Process-wide registry
prefix_registry = PrefixRegistry()
