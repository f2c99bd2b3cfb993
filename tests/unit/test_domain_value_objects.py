"""Tests for domain value objects (IdPrefix, EntityTypeConfig, ParsedIdentifier)."""

import dataclasses

import pytest

from prefixed_ids.domain.value_objects import EntityTypeConfig, IdPrefix, ParsedIdentifier


class TestIdPrefix:
    """IdPrefix: 1-16 chars, lowercase alphanumeric starting with a letter, no separator."""

    def test_valid_prefixes(self) -> None:
        IdPrefix("prod")
        IdPrefix("v2")
        IdPrefix("p")
        IdPrefix("a" * 16)
        assert str(IdPrefix("prod")) == "prod"

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            IdPrefix("")

    def test_too_long_rejected(self) -> None:
        with pytest.raises(ValueError, match="16"):
            IdPrefix("a" * 17)

    def test_separator_rejected(self) -> None:
        with pytest.raises(ValueError, match="separator"):
            IdPrefix("pr_od")

    def test_invalid_format_rejected(self) -> None:
        for value in ("Prod", "1prod", "pr-od", "pr od"):
            with pytest.raises(ValueError, match="lowercase"):
                IdPrefix(value)


class TestEntityTypeConfig:
    def test_prefix_value(self) -> None:
        assert EntityTypeConfig("Product", IdPrefix("prod")).prefix_value == "prod"
        assert EntityTypeConfig("Variant").prefix_value is None

    def test_immutable(self) -> None:
        config = EntityTypeConfig("Product", IdPrefix("prod"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.prefix = IdPrefix("other")  # type: ignore[misc]

    def test_empty_entity_type_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            EntityTypeConfig("")


class TestParsedIdentifier:
    def test_has_prefix(self) -> None:
        assert ParsedIdentifier("prod", "123").has_prefix
        assert ParsedIdentifier("", "123").has_prefix
        assert not ParsedIdentifier(None, "123").has_prefix
