"""Prefixed, entity-typed public identifiers for integer primary keys.

Integer keys are encoded with a digits-only Sqids codec and optionally
rendered as ``<prefix>_<body>`` (e.g. ``prod_...``). Decoding tolerates bare
bodies and legacy raw integer keys.
"""

from prefixed_ids.application.services.codec import IdentifierCodec, get_codec
from prefixed_ids.application.services.identifier_parser import parse_identifier
from prefixed_ids.application.services.prefix_registry import (
    PrefixRegistry,
    prefix_registry,
)
from prefixed_ids.application.services.resolver import PrefixedIdResolver
from prefixed_ids.application.services.strategies import (
    IdentifierLookup,
    build_lookup,
)
from prefixed_ids.domain.exceptions import RecordNotFoundException

__all__ = [
    "IdentifierCodec",
    "get_codec",
    "parse_identifier",
    "PrefixRegistry",
    "prefix_registry",
    "PrefixedIdResolver",
    "IdentifierLookup",
    "build_lookup",
    "RecordNotFoundException",
]
