"""Error Handlers — map request failures to HTTP responses.

Invariants:
    - BlogPostError → plain-text body (exc.message) with exc.http_status
    - RequestValidationError (malformed JSON, JSON that is not an object) → 400
      JSON envelope listing the offending locations
    - Any other exception → 500 JSON envelope, no exception text sent to clients

Design Decisions:
    - Domain errors stay plain text: clients read the message to learn which
      field is missing
    - Body-shape errors keep a JSON envelope since they carry a list of details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from blogposts.core.errors import BlogPostError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Install the blog post, body-shape and fallback handlers on `app`."""
    _register_blog_post_error_handler(app)
    _register_body_error_handler(app)
    _register_fallback_handler(app)


def _error_envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
        },
    }


def _register_blog_post_error_handler(app: FastAPI) -> None:

    @app.exception_handler(BlogPostError)
    async def blog_post_error_handler(request: Request, exc: BlogPostError):
        """Answer a missing field or id mismatch with its message as text."""
        logger.error(
            exc.message,
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return PlainTextResponse(exc.message, status_code=exc.http_status)


def _register_body_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def body_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Reject a body that is not valid JSON or not a JSON object."""
        logger.warning(
            f"Unreadable request body on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        content = _error_envelope(
            "VALIDATION_ERROR", "Request body must be a JSON object",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
        )
        content["error"]["details"] = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=content,
        )


def _register_fallback_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def fallback_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled {type(exc).__name__} on "
            f"{request.method} {request.url.path}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_envelope(
                "INTERNAL_ERROR", "An unexpected error occurred",
                ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
            ),
        )
