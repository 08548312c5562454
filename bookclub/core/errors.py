"""Error Hierarchy — typed, categorized exceptions for every Book Club failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope {"error": <message>}
    - No store internals in user-facing messages (DatabaseError.detail is for logs and /ping)

Design Decisions:
    - Single hierarchy with BookClubError base: FastAPI global handler catches all
"""

from enum import Enum


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
    STARTUP = "startup"
    INTERNAL = "internal"


class BookClubError(Exception):
    """Base exception for all Book Club errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class InputValidationError(BookClubError):
    """Request input failed validation outside the pydantic schemas."""
    def __init__(self, message: str, field: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class ResourceNotFoundError(BookClubError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: int | str | None = None):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BookClubError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, detail: str | None = None):
        super().__init__(
            message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
        self.detail = detail or message


class StartupError(BookClubError):
    """Configuration, connection or schema bootstrap failed before serving traffic."""
    def __init__(self, message: str, stage: str):
        super().__init__(
            f"Startup failed during {stage}: {message}",
            "STARTUP_ERROR", ErrorCategory.STARTUP,
            ErrorSeverity.CRITICAL, 500,
        )
        self.stage = stage
