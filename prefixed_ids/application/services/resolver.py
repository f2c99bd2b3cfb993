"""Resolve external identifiers to integer keys and entities.

Order, stopping at the first success:
    1. parse the identifier and decode its body with the codec;
    2. if the whole identifier is plain decimal digits, use it as a legacy key;
    3. otherwise nothing.

New prefixed identifiers therefore win, while raw integer keys issued before
the codec keep resolving. A derived key with no entity behind it is final:
no further fallback is attempted.
"""

from __future__ import annotations

import re
from typing import Any

from prefixed_ids.application.interfaces.repositories import IEntityRepository
from prefixed_ids.application.interfaces.services import IIdentifierCodec
from prefixed_ids.application.services.codec import MAX_KEY, get_codec
from prefixed_ids.application.services.identifier_parser import parse_identifier
from prefixed_ids.application.services.prefix_registry import (
    PrefixRegistry,
    prefix_registry,
)
from prefixed_ids.core.constants import PREFIX_SEPARATOR
from prefixed_ids.domain.exceptions import RecordNotFoundException
from prefixed_ids.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# ASCII only: str.isdigit() and \d also accept other Unicode digits.
_LEGACY_KEY_RE = re.compile(r"[0-9]+")


class PrefixedIdResolver:
    """Identifier operations for one entity type.

    Pure apart from the optional repository lookups; safe to share.
    """

    def __init__(
        self,
        entity_type: str,
        repository: IEntityRepository | None = None,
        *,
        codec: IIdentifierCodec | None = None,
        registry: PrefixRegistry | None = None,
    ) -> None:
        self.entity_type = entity_type
        self.repository = repository
        self.codec = codec or get_codec()
        self.registry = registry if registry is not None else prefix_registry

    @property
    def prefix(self) -> str | None:
        return self.registry.prefix_of(self.entity_type)

    def encode(self, key: int) -> str:
        """Return the encoded body for key (no prefix)."""
        return self.codec.encode_key(key)

    def prefixed_id(self, key: int | None) -> str | None:
        """Return "<prefix>_<body>", or the bare body when no prefix is registered.

        None for unsaved records (key is None).
        """
        if key is None:
            return None
        body = self.encode(key)
        prefix = self.prefix
        return f"{prefix}{PREFIX_SEPARATOR}{body}" if prefix else body

    def decode_prefixed_id(self, raw: str | int | None) -> int | None:
        """Decode the body of raw; no legacy integer fallback."""
        parsed = parse_identifier(raw)
        if parsed is None:
            return None
        return self.codec.decode_key(parsed.body)

    def resolve_to_key(self, raw: str | int | None) -> int | None:
        """Derive the integer key for raw, falling back to a legacy integer key."""
        key = self.decode_prefixed_id(raw)
        if key is not None:
            return key
        if raw is None:
            return None
        text = str(raw)
        if not _LEGACY_KEY_RE.fullmatch(text):
            return None
        key = int(text)
        if key > MAX_KEY:
            logger.debug("Legacy %s key %s is out of range", self.entity_type, text)
            return None
        logger.debug("Resolved %s identifier %r as legacy integer key", self.entity_type, text)
        return key

    def resolve_or_fail(self, raw: str | int | None) -> int:
        """Like resolve_to_key but raise RecordNotFoundException instead of returning None."""
        key = self.resolve_to_key(raw)
        if key is None:
            raise RecordNotFoundException(self.entity_type, _display(raw))
        return key

    async def resolve_entity(self, raw: str | int | None) -> Any | None:
        """Return the entity for raw, or None if no key is derivable or no entity has it."""
        key = self.resolve_to_key(raw)
        if key is None:
            return None
        return await self._require_repository().get_by_id(key)

    async def resolve_entity_or_fail(self, raw: str | int | None) -> Any:
        """Return the entity for raw; raise RecordNotFoundException otherwise."""
        entity = await self.resolve_entity(raw)
        if entity is None:
            raise RecordNotFoundException(self.entity_type, _display(raw))
        return entity

    def _require_repository(self) -> IEntityRepository:
        if self.repository is None:
            raise RuntimeError(
                f"PrefixedIdResolver for {self.entity_type} has no repository; "
                "pass one to resolve entities"
            )
        return self.repository


def _display(raw: str | int | None) -> str:
    return "" if raw is None else str(raw)
