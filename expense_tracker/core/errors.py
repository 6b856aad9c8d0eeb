"""Error Hierarchy - typed, categorized exceptions for all Expense Tracker failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ExpenseTrackerError base: one global handler catches all
    - Request validation is left to FastAPI's RequestValidationError (malformed JSON,
      wrong field types, unparseable dates) and rendered in the same envelope
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    PERSISTENCE = "persistence"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    expense_id: int | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class ExpenseTrackerError(Exception):
    """Base exception for all Expense Tracker errors."""

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
                    "expense_id": self.context.expense_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(ExpenseTrackerError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.expense_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PersistenceError(ExpenseTrackerError):
    """Storage backend operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "PERSISTENCE_ERROR", ErrorCategory.PERSISTENCE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
