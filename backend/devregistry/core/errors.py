"""Error Hierarchy — typed, categorized exceptions for all developer registry failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors map to HTTP 400; infrastructure errors to 503
    - to_response() produces the REST envelope {"message", "errorCode"}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DeveloperRegistryError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    developer_id: int | None = None
    email: str | None = None
    debug_info: dict[str, Any] | None = None


class DeveloperRegistryError(Exception):
    """Base exception for all developer registry errors."""

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
        return {"message": self.message, "errorCode": self.code}


# ─── Domain Errors (400-level) ──────────────────────────────────

class DuplicateEmailError(DeveloperRegistryError):
    """A developer with the same email already exists (any status)."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.email = email
        super().__init__(
            "Developer with defined email already exists",
            "DEVELOPER_DUPLICATE_EMAIL", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.email = email


class DeveloperNotFoundError(DeveloperRegistryError):
    """Referenced developer id does not exist in the store."""
    def __init__(
        self, developer_id: int | None, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.developer_id = developer_id
        super().__init__(
            "Developer not found",
            "DEVELOPER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.developer_id = developer_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(DeveloperRegistryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
