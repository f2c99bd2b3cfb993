"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class IIdentifierCodec(Protocol):
    """Protocol for the integer <-> string identifier codec."""

    def encode(self, ids: Sequence[int]) -> str:
        """Encode non-negative integers; deterministic and reversible."""

    def decode(self, value: str) -> list[int] | None:
        """Decode a string; None when it is not a canonical encoding."""

    def encode_key(self, key: int) -> str:
        """Encode a single key."""

    def decode_key(self, value: str) -> int | None:
        """Decode to a single key, or None."""


class IIdentifierStrategy(Protocol):
    """One way of turning an external identifier into an entity."""

    async def find(self, raw: str) -> Any | None:
        """Return the entity, or None when this strategy does not apply."""
