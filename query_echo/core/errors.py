"""Error Hierarchy — typed, categorized exceptions for every query-echo failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors are 400-level and terminal for that single request
    - to_response() produces the REST envelope used by every error handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with QueryEchoError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - Client-side build errors share the hierarchy so callers catch one base class
"""

from dataclasses import dataclass, field
from enum import Enum
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
    CLIENT = "client"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    parameter: str | None = None


class QueryEchoError(Exception):
    """Base exception for all query-echo errors."""

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
                    "path": self.context.path,
                    "parameter": self.context.parameter,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class MissingParameterError(QueryEchoError):
    """A required query parameter is absent from the request."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.parameter = name
        super().__init__(
            f"Required query parameter '{name}' is missing",
            "MISSING_PARAMETER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.name = name


class MalformedQueryError(QueryEchoError):
    """Query string carries an escape that cannot be decoded."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Malformed query string: {reason}",
            "MALFORMED_QUERY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.reason = reason


# ─── Client Errors (never sent over HTTP) ───────────────────────

class MissingTemplateVariableError(QueryEchoError):
    """URI template placeholder has no substitution value."""
    def __init__(self, variable: str, context: ErrorContext | None = None):
        super().__init__(
            f"No value available to expand URI template variable '{variable}'",
            "MISSING_TEMPLATE_VARIABLE", ErrorCategory.CLIENT,
            ErrorSeverity.ERROR, context, 400,
        )
        self.variable = variable
