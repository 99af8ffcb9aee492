"""Domain exceptions for the roles service.

Defines domain-level exceptions raised by the application layer and the
persistence error translator. Presentation layer maps them to HTTP
responses in exception handlers.
"""

from typing import Any


class RolesApiException(Exception):
    """Base exception for all roles service errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. resource_id, constraint).
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
        """Return the JSON error body: error, message and (when present) details."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(RolesApiException):
    """Raised when data is rejected as invalid (e.g. a required column left null)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(RolesApiException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str | int | None = None) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'Role').
            resource_id: The ID that was not found; None when the missing row is unknown.
        """
        if resource_id is None:
            message = f"{resource_type} not found."
            details: dict[str, Any] = {"resource_type": resource_type}
        else:
            message = f"{resource_type} not found: {resource_id}"
            details = {"resource_type": resource_type, "resource_id": resource_id}
        super().__init__(message, "RESOURCE_NOT_FOUND", details)


class ConflictException(RolesApiException):
    """Raised when a write collides with an existing record (unique constraint)."""

    def __init__(
        self,
        message: str = "Resource already exists",
        constraint: str | None = None,
    ) -> None:
        """Initialize with message and optional constraint name.

        Args:
            message: Human-readable description.
            constraint: Name of the violated constraint when the driver reports it.
        """
        details = {"constraint": constraint} if constraint else {}
        super().__init__(message, "CONFLICT", details)


class ReferentialIntegrityException(RolesApiException):
    """Raised when a write breaks a foreign key (e.g. deleting a role still referenced)."""

    def __init__(
        self,
        message: str = "Operation violates a foreign key constraint",
        constraint: str | None = None,
    ) -> None:
        details = {"constraint": constraint} if constraint else {}
        super().__init__(message, "REFERENTIAL_INTEGRITY_ERROR", details)

