"""Error Hierarchy - typed, categorized exceptions for every enrollment failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity), http_status
    - Domain errors (400-level) are caller mistakes or business-rule rejections
    - Infrastructure errors (500) are critical; their message is for logs only, clients get
      the generic internal envelope
    - to_response() produces the single REST error envelope used by every endpoint

Design Decisions:
    - Single hierarchy with EnrollmentError base: one global handler converts all of them
    - ErrorContext as dataclass: carries subject/resource ids to logs without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    subject_id: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class EnrollmentError(Exception):
    """Base exception for all enrollment API errors."""

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
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Request Errors (400) ────────────────────────────────────────

class InvalidRequestError(EnrollmentError):
    """Missing or malformed input."""
    def __init__(self, message: str, field: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class CourseFullError(EnrollmentError):
    """Course has no available slots."""
    def __init__(self, course_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_id = course_id
        super().__init__(
            "Course is full",
            "COURSE_FULL", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.course_id = course_id


class SeedAlreadyAppliedError(EnrollmentError):
    """Seeding refused because courses already exist."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Database already contains courses. Clear existing data first.",
            "SEED_ALREADY_APPLIED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Access Errors (401 / 403) ───────────────────────────────────

class UnauthorizedError(EnrollmentError):
    """Bearer credential missing or rejected by the identity verifier."""
    def __init__(self, message: str = "Unauthorized - Invalid token", context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ForbiddenError(EnrollmentError):
    """Caller tried to act on another subject's resource."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


# ─── Not Found (404) ─────────────────────────────────────────────

class ResourceNotFoundError(EnrollmentError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type


class StudentNotRegisteredError(ResourceNotFoundError):
    """Authenticated subject has no student record yet."""
    def __init__(self, student_id: str, context: ErrorContext | None = None):
        super().__init__("Student", student_id, context)
        self.message = "Student not found. Please complete registration first."
        self.code = "STUDENT_NOT_REGISTERED"
        self.args = (self.message,)


class EnrollmentNotActiveError(ResourceNotFoundError):
    """Enrollment exists but is already dropped or completed."""
    def __init__(self, enrollment_id: str, status: str, context: ErrorContext | None = None):
        super().__init__("Enrollment", enrollment_id, context)
        self.message = f"No active enrollment (status: {status})"
        self.code = "ENROLLMENT_NOT_ACTIVE"
        self.args = (self.message,)


# ─── Conflicts (409) ─────────────────────────────────────────────

class ConflictError(EnrollmentError):
    """Write would duplicate an existing record."""
    def __init__(self, message: str, code: str = "CONFLICT", context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class StudentAlreadyRegisteredError(ConflictError):
    def __init__(self, student_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_id = student_id
        super().__init__("Student already registered", "STUDENT_ALREADY_REGISTERED", ctx)


class AlreadyEnrolledError(ConflictError):
    def __init__(self, enrollment_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_id = enrollment_id
        super().__init__("Already enrolled in this course", "ALREADY_ENROLLED", ctx)


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(EnrollmentError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
