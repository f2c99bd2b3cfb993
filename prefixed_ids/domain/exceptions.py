"""Domain exceptions for prefixed identifiers.

Decode failures are not exceptions: the codec and parser return None and
callers fall back. Only strict lookups surface RecordNotFoundException.
Presentation layer maps these to HTTP responses in exception handlers.
"""

from typing import Any


class PrefixedIdException(Exception):
    """Base exception for all prefixed-ids errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. entity_type, identifier).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serializable form used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(PrefixedIdException):
    """Raised when input validation fails (e.g. negative key or bad prefix)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class RecordNotFoundException(PrefixedIdException):
    """Raised when no key can be derived from an identifier or no record has that key."""

    def __init__(self, entity_type: str, identifier: str) -> None:
        """Initialize with entity type and the identifier as received.

        Args:
            entity_type: Entity type name (e.g. 'Product').
            identifier: The raw identifier that could not be resolved.
        """
        super().__init__(
            f"Couldn't find {entity_type} with identifier={identifier}",
            "RECORD_NOT_FOUND",
            {"entity_type": entity_type, "identifier": identifier},
        )
        self.entity_type = entity_type
        self.identifier = identifier


class PrefixAlreadyRegisteredException(PrefixedIdException):
    """Raised when an entity type or prefix is already registered differently."""

    def __init__(
        self, entity_type: str, prefix: str | None, existing: str | None
    ) -> None:
        """Initialize with the rejected registration and the existing owner/prefix.

        Args:
            entity_type: Entity type being registered.
            prefix: Prefix requested for it.
            existing: Prefix already held by entity_type, or the entity type
                that already owns prefix.
        """
        super().__init__(
            f"Cannot register prefix {prefix!r} for {entity_type}: conflicts with {existing!r}",
            "PREFIX_ALREADY_REGISTERED",
            {"entity_type": entity_type, "prefix": prefix, "existing": existing},
        )


class EntityTypeNotRegisteredException(PrefixedIdException):
    """Raised when an operation needs an entity type that was never registered."""

    def __init__(self, entity_type: str) -> None:
        super().__init__(
            f"Entity type not registered: {entity_type}",
            "ENTITY_TYPE_NOT_REGISTERED",
            {"entity_type": entity_type},
        )


class SqlNotConfiguredException(PrefixedIdException):
    """Raised when an operation requires a SQL database but DATABASE_URL is empty."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
