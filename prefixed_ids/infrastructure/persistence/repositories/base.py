"""Base repository: lookups by integer primary key (and slug)."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from prefixed_ids.domain.exceptions import RecordNotFoundException
from prefixed_ids.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, find, and get_all.

    Satisfies IEntityRepository, so it can back a PrefixedIdResolver.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, key: int) -> ModelType | None:
        """Return a single record by primary key, or None."""
        return await self.db.get(self.model, key)

    async def find(self, key: int) -> ModelType:
        """Return a single record by primary key; raise RecordNotFoundException if absent."""
        obj = await self.get_by_id(key)
        if obj is None:
            raise RecordNotFoundException(self.model.__name__, str(key))
        return obj

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[ModelType]:
        """Return records with pagination."""
        result = await self.db.execute(select(self.model).offset(skip).limit(limit))
        return list(result.scalars().all())


class SluggedRepository(BaseRepository[ModelType]):
    """Repository for models with a slug column (see SlugMixin)."""

    async def get_by_slug(self, slug: str) -> ModelType | None:
        """Return a single record by slug, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.slug == slug))
        return result.scalar_one_or_none()
