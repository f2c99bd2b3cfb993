"""Domain value objects for prefixed identifiers.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
from dataclasses import dataclass

from prefixed_ids.core.constants import PREFIX_MAX_LENGTH, PREFIX_SEPARATOR

# Lowercase token starting with a letter; never contains the separator.
_PREFIX_RE = re.compile(r"^[a-z][a-z0-9]*$")


@dataclass(frozen=True)
class IdPrefix:
    """Value object for an entity type prefix (e.g. 'prod', 'variant').

    Prefixes are 1-16 characters, lowercase alphanumeric starting with a
    letter. The separator is rejected so that parsing stays unambiguous.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate non-empty, length, and format.

        Raises:
            ValueError: If empty, too long, or not a lowercase token.
        """
        if not self.value:
            raise ValueError("Prefix must be a non-empty string")
        if len(self.value) > PREFIX_MAX_LENGTH:
            raise ValueError(
                f"Prefix must not exceed {PREFIX_MAX_LENGTH} characters"
            )
        if PREFIX_SEPARATOR in self.value:
            raise ValueError(
                f"Prefix must not contain the separator {PREFIX_SEPARATOR!r}"
            )
        if not _PREFIX_RE.match(self.value):
            raise ValueError(
                "Prefix must be lowercase alphanumeric starting with a letter (e.g., 'prod', 'v2')"
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EntityTypeConfig:
    """Per-entity-type identifier configuration, fixed at registration."""

    entity_type: str
    prefix: IdPrefix | None = None

    def __post_init__(self) -> None:
        if not self.entity_type:
            raise ValueError("Entity type must be a non-empty string")

    @property
    def prefix_value(self) -> str | None:
        return self.prefix.value if self.prefix else None


@dataclass(frozen=True)
class ParsedIdentifier:
    """External identifier split into an optional prefix and an encoded body.

    Either part may be empty ("_abc", "abc_"); decoding decides validity.
    """

    prefix: str | None
    body: str

    @property
    def has_prefix(self) -> bool:
        return self.prefix is not None
