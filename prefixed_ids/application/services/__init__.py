"""Application services: codec, prefix registry, parser, resolver, strategies."""

from prefixed_ids.application.services.codec import IdentifierCodec, get_codec
from prefixed_ids.application.services.identifier_parser import parse_identifier
from prefixed_ids.application.services.prefix_registry import (
    PrefixRegistry,
    prefix_registry,
)
from prefixed_ids.application.services.resolver import PrefixedIdResolver
from prefixed_ids.application.services.strategies import (
    IdentifierLookup,
    PrefixedIdStrategy,
    SlugStrategy,
    build_lookup,
)

__all__ = [
    "IdentifierCodec",
    "get_codec",
    "parse_identifier",
    "PrefixRegistry",
    "prefix_registry",
    "PrefixedIdResolver",
    "IdentifierLookup",
    "PrefixedIdStrategy",
    "SlugStrategy",
    "build_lookup",
]
