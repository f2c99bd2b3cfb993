"""Identifier encode/decode API schemas."""

from pydantic import BaseModel, Field


class EncodedIdentifier(BaseModel):
    """Response for GET /identifiers/{entity_type}/encode/{key}."""

    entity_type: str = Field(..., description="Entity type name (e.g. Product)")
    key: int = Field(..., ge=0, description="Integer primary key")
    identifier: str = Field(..., description="Public identifier, e.g. prod_<digits>")


class DecodedIdentifier(BaseModel):
    """Response for GET /identifiers/{entity_type}/decode/{identifier}."""

    entity_type: str = Field(..., description="Entity type name (e.g. Product)")
    identifier: str = Field(..., description="Identifier as received")
    key: int = Field(..., ge=0, description="Resolved integer primary key")
