"""Error Hierarchy — typed, categorized exceptions for blog post request failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - message is the exact plain-text body returned to the client
    - Only request validation failures are errors; missing records are not

Design Decisions:
    - Single hierarchy with BlogPostError base: one global handler catches all
    - Messages name the offending field so clients can fix the request
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
    INTERNAL = "internal"


class BlogPostError(Exception):
    """Base exception for all blog post API errors."""

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


# ─── Validation Errors (400-level) ──────────────────────────────

class MissingFieldError(BlogPostError):
    """A required key is absent from the request body."""
    def __init__(self, field: str):
        super().__init__(
            f"Missing `{field}` in request body",
            "MISSING_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 400,
        )
        self.field = field


class IdMismatchError(BlogPostError):
    """PUT path id and body id disagree."""
    def __init__(self, path_id: str, body_id: object):
        super().__init__(
            f"Request path id ({path_id}) and request body id "
            f"({body_id}) must match",
            "ID_MISMATCH", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 400,
        )
        self.path_id = path_id
        self.body_id = body_id
