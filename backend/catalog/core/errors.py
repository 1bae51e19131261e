"""Error Hierarchy: typed, categorized exceptions for catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Fetch failures are raised by infrastructure and recovered by the loader;
      they never reach a listing consumer as an exception
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with CatalogError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging
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
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the REST envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    listing: str | None = None
    endpoint: str | None = None
    status_code: int | None = None
    debug_info: dict[str, Any] | None = None


class CatalogError(Exception):
    """Base exception for all catalog errors."""

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
                    "listing": self.context.listing,
                    "endpoint": self.context.endpoint,
                },
            }
        }


# ─── Infrastructure Errors (500-level) ──────────────────────────

class CatalogAPIError(CatalogError):
    """Upstream catalog API call failed (transport, non-2xx, or bad payload)."""
    def __init__(
        self,
        message: str,
        api_error_type: str,
        context: ErrorContext | None = None,
    ):
        category = (
            ErrorCategory.TIMEOUT if api_error_type == "timeout"
            else ErrorCategory.EXTERNAL_API
        )
        super().__init__(
            f"Catalog API error ({api_error_type}): {message}",
            "CATALOG_API_ERROR", category,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.api_error_type = api_error_type


class MalformedPayloadError(CatalogAPIError):
    """Upstream answered 2xx but the body is not a list of records."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "malformed_payload", context=context)
        self.code = "MALFORMED_PAYLOAD"
