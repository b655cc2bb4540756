"""Error Hierarchy — typed, categorized exceptions for continent lookup failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - ContinentNotFoundError message is exactly "Continent <key> not found"
    - to_response() produces the REST envelope used by the global error handler

Design Decisions:
    - Single hierarchy with ContinentApiError base: FastAPI global handler catches all
    - Lookup misses map to 500, not 404: the wire contract predates this service
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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    continent_key: str | None = None
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class ContinentApiError(Exception):
    """Base exception for all continent API errors."""

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
                    "continent_key": self.context.continent_key,
                    "path": self.context.path,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class ContinentNotFoundError(ContinentApiError):
    """Lookup key is not present in the continent table."""
    def __init__(self, key: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.continent_key = key
        super().__init__(
            f"Continent {key} not found",
            "CONTINENT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 500,
        )
        self.key = key


class MalformedPathError(ContinentApiError):
    """Request path does not start with the expected route prefix."""
    def __init__(self, path: str, prefix: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.path = path
        super().__init__(
            f"Path '{path}' does not start with '{prefix}'",
            "MALFORMED_PATH", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.path = path
        self.prefix = prefix


# ─── Infrastructure Errors ──────────────────────────────────────

class InternalServiceError(ContinentApiError):
    """Unexpected failure outside the modelled lookup errors."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
