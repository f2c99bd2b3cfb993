"""API request/response schemas (Pydantic)."""

from prefixed_ids.schemas.health import HealthResponse
from prefixed_ids.schemas.identifier import DecodedIdentifier, EncodedIdentifier

__all__ = ["HealthResponse", "DecodedIdentifier", "EncodedIdentifier"]
