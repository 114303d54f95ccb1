"""Error Hierarchy — typed, categorized exceptions for all catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400/404) are recoverable; infrastructure errors (500) are critical
    - to_response() produces the REST envelope the API returns verbatim
    - Body validation uses "messages" (list); query/path validation uses "message" (str)
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CatalogError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from catalog.core.domain_types import ResourceType


SOLE_AUTHOR_MESSAGE = (
    "Cannot delete author: they are the only author of one or more papers"
)
INVALID_QUERY_MESSAGE = "Invalid query parameter format"
INVALID_ID_MESSAGE = "Invalid ID format"


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
    CONSTRAINT = "constraint"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: int | None = None
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
            "error": "Internal Server Error",
            "message": "An unexpected error occurred",
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class BodyValidationError(CatalogError):
    """Request body failed validation. Carries every collected message."""
    def __init__(self, messages: list[str], context: ErrorContext | None = None):
        super().__init__(
            "; ".join(messages), "BODY_VALIDATION_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, context, 400,
        )
        self.messages = list(messages)

    def to_response(self) -> dict:
        return {"error": "Validation Error", "messages": self.messages}


class ParameterValidationError(CatalogError):
    """Query string or path parameter failed validation (first failure only)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PARAMETER_VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )

    def to_response(self) -> dict:
        return {"error": "Validation Error", "message": self.message}


class ResourceNotFoundError(CatalogError):
    """Requested paper or author does not exist."""
    def __init__(
        self,
        resource_type: ResourceType,
        resource_id: int,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type.value
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type.value} not found", "RESOURCE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id

    def to_response(self) -> dict:
        return {"error": self.message}


class SoleAuthorError(CatalogError):
    """Author deletion refused: it would leave one or more papers without authors."""
    def __init__(
        self,
        author_id: int,
        paper_ids: list[int],
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = ResourceType.AUTHOR.value
        ctx.resource_id = author_id
        ctx.debug_info = {"sole_authored_paper_ids": list(paper_ids)}
        super().__init__(
            SOLE_AUTHOR_MESSAGE, "SOLE_AUTHOR_CONSTRAINT",
            ErrorCategory.CONSTRAINT, ErrorSeverity.WARNING, ctx, 400,
        )
        self.author_id = author_id
        self.paper_ids = list(paper_ids)

    def to_response(self) -> dict:
        return {"error": "Constraint Error", "message": self.message}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CatalogError):
    """Database operation failed. Rendered with the generic 500 body."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
