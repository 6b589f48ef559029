"""Domain exceptions for the template definition service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any

# Default user-facing messages per error code. Conflict and not-found
# messages never confirm whether a resource exists in another tenant.
USER_MESSAGES: dict[str, str] = {
    "VALIDATION_ERROR": "The submitted data is invalid.",
    "MALFORMED_CONTENT": "The template content structure is invalid.",
    "SLUG_CONFLICT": "A template with this name already exists in your organization.",
    "NOT_FOUND": "The requested template could not be found.",
    "SERVICE_UNAVAILABLE": "The service is temporarily unavailable.",
}


def get_user_message(error_code: str, custom_message: str | None = None) -> str:
    """Return custom_message when given, else the default message for error_code."""
    if custom_message:
        return custom_message
    return USER_MESSAGES.get(error_code, "An unexpected error occurred.")


class CrmTemplatesException(Exception):
    """Base exception for all template service errors.

    All custom exceptions inherit from this class so the presentation layer
    can map them to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
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
        """Return the JSON error body used by the API."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(CrmTemplatesException):
    """Raised when input validation fails (bad field, limit exceeded, missing value)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field location.

        Args:
            message: Description of the validation failure.
            field: Optional location of the offending input (e.g. 'fields[2].options').
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class MalformedContentException(CrmTemplatesException):
    """Raised on write when template content is not JSON or not a JSON object."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            get_user_message("MALFORMED_CONTENT"),
            "MALFORMED_CONTENT",
            {"field": "content", "reason": reason},
        )


class SlugConflictException(CrmTemplatesException):
    """Raised when the (tenant, slug) unique constraint rejects an insert.

    Retryable: re-run slug arbitration with fresh entropy and insert again.
    """

    def __init__(self, slug: str) -> None:
        """Initialize with the slug the caller proposed.

        Args:
            slug: The slug that was rejected (the caller's own input).
        """
        super().__init__(
            get_user_message("SLUG_CONFLICT"),
            "SLUG_CONFLICT",
            {"slug": slug},
        )


class TemplateNotFoundException(CrmTemplatesException):
    """Raised when a template id does not exist for the tenant.

    A template owned by another tenant raises the same error, so callers
    cannot probe other tenants.
    """

    def __init__(self, template_id: str) -> None:
        super().__init__(
            get_user_message("NOT_FOUND"),
            "NOT_FOUND",
            {"resource_type": "template", "resource_id": template_id},
        )


class SqlNotConfiguredException(CrmTemplatesException):
    """Raised when an operation requires the SQL database but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
