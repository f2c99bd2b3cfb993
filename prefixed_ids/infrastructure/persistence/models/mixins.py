"""SQLAlchemy mixins for common model patterns (DRY).

Provides: IntegerIdMixin, SlugMixin, PrefixedIdMixin.

Prefixed ids are computed from the integer primary key on access; there is
no column for them. Declare a model's prefix once, right after the class:

    class Product(IntegerIdMixin, PrefixedIdMixin, Base):
        __tablename__ = "product"

    Product.register_prefix_id("prod")
"""

from typing import ClassVar

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from prefixed_ids.application.services.prefix_registry import (
    PrefixRegistry,
    prefix_registry,
)
from prefixed_ids.application.services.resolver import PrefixedIdResolver
from prefixed_ids.domain.value_objects import EntityTypeConfig


class IntegerIdMixin:
    """Mixin for models using an autoincrement 64-bit integer primary key."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        # SQLite only autoincrements INTEGER PRIMARY KEY.
        return mapped_column(
            BigInteger().with_variant(Integer, "sqlite"),
            primary_key=True,
            autoincrement=True,
        )


class SlugMixin:
    """Mixin for models with a unique human-readable slug."""

    @declared_attr
    def slug(cls) -> Mapped[str | None]:
        return mapped_column(String(255), unique=True, nullable=True, index=True)


class PrefixedIdMixin:
    """Mixin adding prefixed_id and to_param() on top of an integer id."""

    # Override in tests or to isolate a model from the process-wide registry.
    _prefix_registry: ClassVar[PrefixRegistry] = prefix_registry

    @classmethod
    def entity_type_name(cls) -> str:
        return cls.__name__

    @classmethod
    def register_prefix_id(cls, prefix: str) -> EntityTypeConfig:
        """Declare this model's identifier prefix (call once, at definition time)."""
        return cls._prefix_registry.register(cls.entity_type_name(), prefix)

    @classmethod
    def identifier_resolver(cls) -> PrefixedIdResolver:
        """Resolver for this model without a repository (encode/decode only)."""
        return PrefixedIdResolver(cls.entity_type_name(), registry=cls._prefix_registry)

    @property
    def prefixed_id(self) -> str | None:
        """Prefixed id for this record, or None when it has no id yet."""
        return self.identifier_resolver().prefixed_id(self._primary_key())

    def to_param(self) -> str | None:
        """Identifier to use in URLs.

        Slugged models never use prefixed ids: slug when set, else the plain
        integer id. Other models use the prefixed id when a prefix is
        registered, else the plain integer id. None for unsaved records.
        """
        key = self._primary_key()
        if isinstance(self, SlugMixin):
            slug = getattr(self, "slug", None)
            if slug:
                return slug
            return None if key is None else str(key)
        if key is None:
            return None
        if self._prefix_registry.prefix_of(self.entity_type_name()) is None:
            return str(key)
        return self.prefixed_id

    def _primary_key(self) -> int | None:
        return getattr(self, "id", None)
