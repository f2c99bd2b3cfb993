"""Domain layer: value objects and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from prefixed_ids.domain.exceptions import (
    EntityTypeNotRegisteredException,
    PrefixAlreadyRegisteredException,
    PrefixedIdException,
    RecordNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)
from prefixed_ids.domain.value_objects import (
    EntityTypeConfig,
    IdPrefix,
    ParsedIdentifier,
)

__all__ = [
    # Exceptions
    "EntityTypeNotRegisteredException",
    "PrefixAlreadyRegisteredException",
    "PrefixedIdException",
    "RecordNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
    # Value objects
    "EntityTypeConfig",
    "IdPrefix",
    "ParsedIdentifier",
]
