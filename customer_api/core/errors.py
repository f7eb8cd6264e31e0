"""Error Hierarchy - typed, categorized exceptions for all Customer API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope rendered by the global handlers
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CustomerApiError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
    - error_from_info() is the only bridge from validator ErrorInfo to exceptions
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from customer_api.core.domain_types import ErrorInfo, ErrorType


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context surfaced in the error envelope and in logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field: str | None = None
    resource_id: str | None = None


class CustomerApiError(Exception):
    """Base exception for all Customer API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "field": self.context.field,
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class BadInputError(CustomerApiError):
    """Request input failed validation."""
    def __init__(
        self, message: str, field: str | None = None, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            message, "BAD_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field


class ResourceNotFoundError(CustomerApiError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class AuthenticationError(CustomerApiError):
    """Caller did not present a valid bearer token."""
    def __init__(
        self, message: str = "Authentication required", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CustomerApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class UnexpectedError(CustomerApiError):
    """Operation failed for a reason no validator classifies."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


# ─── ErrorInfo bridge ───────────────────────────────────────────

def error_from_info(info: ErrorInfo, resource_type: str = "Customer") -> CustomerApiError:
    """Map a non-OK ErrorInfo to the exception the HTTP layer renders."""
    if info.error_type == ErrorType.BAD_INPUT:
        return BadInputError(info.message, info.field)
    if info.error_type == ErrorType.NOT_FOUND:
        return ResourceNotFoundError(resource_type, info.value or "")
    if info.error_type == ErrorType.UNEXPECTED:
        return UnexpectedError(info.message)
    raise ValueError("error_from_info called with an OK result")


def raise_for_error(info: ErrorInfo, resource_type: str = "Customer") -> None:
    """Raise the mapped exception when info is not OK; no-op otherwise."""
    if not info.is_ok:
        raise error_from_info(info, resource_type)
