"""Identifier endpoints: encode a key or decode an identifier for a registered entity type."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from prefixed_ids.api.v1.dependencies.identifiers import get_resolver
from prefixed_ids.application.services.codec import MAX_KEY
from prefixed_ids.application.services.resolver import PrefixedIdResolver
from prefixed_ids.schemas.identifier import DecodedIdentifier, EncodedIdentifier

router = APIRouter()


@router.get("/{entity_type}/encode/{key}", response_model=EncodedIdentifier)
def encode_identifier(
    key: Annotated[int, Path(ge=0, le=MAX_KEY)],
    resolver: Annotated[PrefixedIdResolver, Depends(get_resolver)],
) -> EncodedIdentifier:
    """Return the public identifier for an integer key."""
    return EncodedIdentifier(
        entity_type=resolver.entity_type,
        key=key,
        identifier=resolver.prefixed_id(key),
    )


@router.get("/{entity_type}/decode/{identifier}", response_model=DecodedIdentifier)
def decode_identifier(
    identifier: str,
    resolver: Annotated[PrefixedIdResolver, Depends(get_resolver)],
) -> DecodedIdentifier:
    """Return the integer key for an identifier (prefixed, bare, or legacy integer)."""
    return DecodedIdentifier(
        entity_type=resolver.entity_type,
        identifier=identifier,
        key=resolver.resolve_or_fail(identifier),
    )
