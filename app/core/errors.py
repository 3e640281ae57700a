"""Error Hierarchy — typed, categorized exceptions for all Task Tracker failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400/404) are terminal for the request; infrastructure errors are 503
    - to_response() produces the REST envelope
    - Messages embed the offending identifier or field

Design Decisions:
    - Single hierarchy with TaskTrackerError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


STATUS_CHOICES = "NEW, IN_PROGRESS, COMPLETED, CANCELLED"


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
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    task_id: int | None = None
    user_id: int | None = None
    field_name: str | None = None


class TaskTrackerError(Exception):
    """Base exception for all Task Tracker errors."""

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
                    "task_id": self.context.task_id,
                    "user_id": self.context.user_id,
                    "field": self.context.field_name,
                },
            }
        }


# ─── Domain Errors (400/404) ────────────────────────────────────

class ResourceNotFoundError(TaskTrackerError):
    """Requested resource does not exist."""
    def __init__(
        self,
        resource_type: str,
        resource_id: int,
        code: str = "RESOURCE_NOT_FOUND",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} with id: {resource_id} was not found.",
            code, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_id = resource_id


class UserNotFoundError(ResourceNotFoundError):
    """Referenced or requested user does not exist."""
    def __init__(self, user_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__("User", user_id, "USER_NOT_FOUND", ctx)


class TaskNotFoundError(ResourceNotFoundError):
    """Requested task does not exist."""
    def __init__(self, task_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.task_id = task_id
        super().__init__("Task", task_id, "TASK_NOT_FOUND", ctx)


class InvalidTaskDataError(TaskTrackerError):
    """Full update is missing a required field."""
    def __init__(self, field_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field_name
        super().__init__(
            f"{field_name.capitalize()} cannot be empty",
            "INVALID_TASK_DATA", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field_name


class InvalidStatusError(TaskTrackerError):
    """Status value does not match any TaskStatus member."""
    def __init__(self, value: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = "status"
        super().__init__(
            f"Wrong status '{value}'. Choose one from the list: {STATUS_CHOICES}.",
            "INVALID_STATUS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.value = value


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TaskTrackerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
