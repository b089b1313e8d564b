"""
BirdRef Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the error scenarios of the bird API.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by the validation dependency, the store, and the bird service.

Exception Hierarchy:
    BirdRefError (base)
    ├── ValidationError       → 400 Bad Request (malformed request shape)
    ├── NotFoundError         → 404 Not Found (zero rows matched/affected)
    ├── StoreRejectionError   → 400 Bad Request ("Error: <driver detail>")
    └── DatabaseError         → 500 Internal Server Error (generic message)

Every error body carries a `message` key; `context` is logged server-side and
only surfaced where noted on the class.
"""

from typing import Any, Dict, Optional


class BirdRefError(Exception):
    """
    Base exception for all BirdRef application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not returned unless noted)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BirdRefError):
    """
    Raised when the request body does not have the expected shape.

    When:    Array field missing or not an array, unparseable JSON body.
    HTTP:    400 Bad Request; `context` is returned as `details`.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(BirdRefError):
    """
    Raised when a well-formed request matched or affected zero rows.

    HTTP:    404 Not Found

    `echo` holds extra fields copied verbatim into the response body, e.g.
    the requested names of a delete that removed nothing.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        resource: str = "resource",
        echo: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        super().__init__(
            message=message or f"The requested {resource} was not found",
            context=ctx,
        )
        self.echo = echo or {}


class StoreRejectionError(BirdRefError):
    """
    Raised when the database rejects or fails to execute a statement.

    What:    Constraint violation, bad parameter type, lost connection.
    HTTP:    400 Bad Request, message "Error: <detail>".

    `detail` is the human-readable string the driver attached to the failure.
    `kind` separates data problems ("constraint", "data") from infrastructure
    problems ("connectivity") for logging; both keep the same public status.
    """

    def __init__(
        self,
        detail: str,
        kind: str = "data",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["kind"] = kind
        super().__init__(message=f"Error: {detail}", context=ctx)
        self.detail = detail
        self.kind = kind


class DatabaseError(BirdRefError):
    """
    Raised when a read that must not fail does fail.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the underlying
    store detail is logged server-side only.
    """

    def __init__(
        self,
        message: str = "server error - contact support",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
