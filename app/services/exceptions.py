"""Domain-specific exceptions for the job postings data-access layer.

Architecture:
- ServiceError: Base exception with correlation ID and context support
- BadRequestError: Caller supplied input the operation cannot act on
- NotFoundError: An id-targeted operation matched no rows

Storage failures (``sqlalchemy.exc.SQLAlchemyError``) are not wrapped here;
they propagate to the caller unmodified.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union
from http import HTTPStatus


class ErrorSeverity(Enum):
    """Error severity levels for logging and monitoring."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    SYSTEM = "system"


class ServiceError(Exception):
    """Base exception for all domain errors.

    Provides structured error information with correlation ID support,
    HTTP status mapping, and rich context for debugging and client responses.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for client handling
        correlation_id: Request correlation ID for tracing
        details: Additional error context
        user_message: User-friendly message for client display
        severity: Error severity level for logging/monitoring
        category: Error category for classification
        http_status: HTTP status code for API responses
    """

    def __init__(
        self,
        message: str,
        error_code: str = "SERVICE_ERROR",
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        user_message: Optional[str] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        http_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.correlation_id = correlation_id
        self.details = details or {}
        self.user_message = user_message or message
        self.severity = severity
        self.category = category
        self.http_status = http_status

    def to_dict(self, include_sensitive: bool = False) -> Dict[str, Any]:
        """Convert exception to dictionary for logging or client response.

        Args:
            include_sensitive: Whether to include internal details

        Returns:
            Dictionary representation of the error
        """
        result = {
            "error_code": self.error_code,
            "message": self.user_message,
            "severity": self.severity.value,
            "category": self.category.value,
            "http_status": self.http_status.value
        }

        if self.correlation_id:
            result["correlation_id"] = self.correlation_id

        if include_sensitive and self.details:
            result["details"] = self.details
            result["internal_message"] = self.message

        return result

    def __str__(self) -> str:
        """String representation for logging."""
        return f"{self.error_code}: {self.message}"


class BadRequestError(ServiceError):
    """Request cannot be acted on as given (e.g. nothing to update)."""

    def __init__(
        self,
        message: str = "Bad Request",
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="BAD_REQUEST",
            correlation_id=correlation_id,
            details=details,
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            http_status=HTTPStatus.BAD_REQUEST
        )


class NotFoundError(ServiceError):
    """No row matched the requested resource id."""

    def __init__(
        self,
        resource_type: str,
        resource_id: Union[int, str],
        correlation_id: Optional[str] = None
    ):
        super().__init__(
            message=f"No {resource_type} with id = {resource_id}",
            error_code=f"{resource_type.upper()}_NOT_FOUND",
            correlation_id=correlation_id,
            details={"resource_type": resource_type, "resource_id": resource_id},
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.RESOURCE_NOT_FOUND,
            http_status=HTTPStatus.NOT_FOUND
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def create_error_response(
    error: ServiceError,
    include_details: bool = False
) -> Dict[str, Any]:
    """Create standardized error response dictionary."""
    return error.to_dict(include_sensitive=include_details)


def get_http_status_for_error(error: Exception) -> HTTPStatus:
    """Get appropriate HTTP status code for an exception.

    Args:
        error: Exception instance

    Returns:
        Appropriate HTTP status code
    """
    if isinstance(error, ServiceError):
        return error.http_status
    return HTTPStatus.INTERNAL_SERVER_ERROR
