"""Error Hierarchy — typed, categorized exceptions for JUtils failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Rendering errors (500-level) are critical; bad request input is rejected by Pydantic before reaching core
    - to_response() produces the REST envelope
    - Helpers never raise for bad text or bad colors: only a failing renderer does

Design Decisions:
    - Single hierarchy with JUtilsError base: FastAPI global handler catches all (ADR: uniform error shape)
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
    RENDERING = "rendering"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class JUtilsError(Exception):
    """Base exception for all JUtils errors."""

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
                    "operation": self.context.operation,
                    "field": self.context.field,
                },
            }
        }


# ─── Rendering Errors (500-level) ───────────────────────────────

class RenderError(JUtilsError):
    """Drawing surface failed to produce an image."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Avatar rendering failed: {message}",
            "RENDER_ERROR", ErrorCategory.RENDERING,
            ErrorSeverity.CRITICAL, context, 500,
        )
