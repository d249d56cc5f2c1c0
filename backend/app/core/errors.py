"""Error Hierarchy - typed, categorized exceptions for the API shell.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - The validation engine itself never raises: invalid records are a normal result.
      RecordValidationError exists only so routes can hand a failed result to the
      global handler.
    - to_response() produces the REST envelope

Design Decisions:
    - Single hierarchy with VbApiError base: one FastAPI handler covers every subclass
    - ErrorContext as dataclass: carries observability data without touching logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone

from app.core.domain_types import RecordType, ValidationResult


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    record_type: RecordType | None = None


class VbApiError(Exception):
    """Base exception for all API errors."""

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
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class RecordValidationError(VbApiError):
    """A submitted record failed one or more business rules."""

    def __init__(
        self,
        record_type: RecordType,
        result: ValidationResult,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.record_type = record_type
        count = len(result)
        super().__init__(
            f"{record_type.value.capitalize()} record failed {count} "
            f"validation rule{'s' if count != 1 else ''}",
            "RECORD_VALIDATION_FAILED", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.record_type = record_type
        self.result = result

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["record_type"] = self.record_type.value
        response["error"]["details"] = self.result.to_dicts()
        return response
