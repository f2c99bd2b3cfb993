"""Repository interfaces (ports) for the application layer.

Protocols define contracts that persistence implementations must fulfill (DIP).
The resolver only needs lookups by integer key; slug lookup is optional.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


class IEntityRepository(Protocol):
    """Protocol for repositories keyed by integer primary key."""

    async def get_by_id(self, key: int) -> Any | None:
        """Return entity by key, or None."""

    async def find(self, key: int) -> Any:
        """Return entity by key; raise RecordNotFoundException when absent."""


@runtime_checkable
class ISlugRepository(Protocol):
    """Protocol for repositories whose entities also carry a unique slug."""

    async def get_by_slug(self, slug: str) -> Any | None:
        """Return entity by slug, or None."""
