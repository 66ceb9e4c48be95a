"""
SuperApp Backend — Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the failure classes the API reports.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services, dependencies and middleware; caught by global handlers.

Exception Hierarchy:
    SuperAppError (base)
    ├── AuthenticationRequiredError  → 401 Unauthorized (no session)
    ├── ValidationError              → 400 Bad Request (client can fix)
    ├── NotFoundError                → 404 Not Found
    ├── StoreError                   → 500 (store message passed through verbatim)
    ├── LLMServiceError              → 503 Service Unavailable
    │   └── CategorizationError      → 502 Bad Gateway (non-conforming model reply)
    ├── SaveFailedError              → 500 ("try again")
    └── SearchFailedError            → 500 ("Search failed")

Nothing in this hierarchy is retried. Every failure is reported to the
caller of the current request and stops there.
"""

from typing import Any, Dict, Optional


class SuperAppError(Exception):
    """
    Base exception for all SuperApp application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client,
                  except where a handler opts in to `details`)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class AuthenticationRequiredError(SuperAppError):
    """
    Raised when an operation needs an identity and the request has none.

    HTTP:    401 Unauthorized
    When:    Every mutating operation and the owner-only reads, before any
             store access.
    """

    def __init__(
        self,
        message: str = "Not authenticated",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ValidationError(SuperAppError):
    """
    Raised when client input fails validation.

    What:    The client sent data that can be corrected (missing required
             field, malformed number, text too long).
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "First name is required",
            "details": {"field": "first_name"}
        }
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


class NotFoundError(SuperAppError):
    """
    Raised when a requested resource does not exist (or is not owned by the caller).

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StoreError(SuperAppError):
    """
    Raised when a store statement fails (constraint violation, connectivity).

    HTTP:    500 Internal Server Error

    The message is the store's own error text, passed to the caller
    unmodified. The operation is aborted and not retried.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class LLMServiceError(SuperAppError):
    """
    Raised when a Gemini call (categorization or embedding) fails.

    HTTP:    503 Service Unavailable
    """

    def __init__(
        self,
        message: str = "AI service is temporarily unavailable",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class CategorizationError(LLMServiceError):
    """
    Raised when the categorization call does not produce a conforming object.

    HTTP:    502 Bad Gateway
    When:    The call failed outright, returned no text, returned invalid JSON,
             or returned JSON that does not match the Categorization schema.
    """

    def __init__(
        self,
        message: str = "Failed to categorize content. Please try again.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class SaveFailedError(SuperAppError):
    """
    Raised for any unexpected failure while saving a Universal Saver item.

    HTTP:    500 Internal Server Error
    The original error is kept in `context` for the server log only.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred. Please try again.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class SearchFailedError(SuperAppError):
    """
    Raised for any failure in the semantic search path after input validation.

    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "Search failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
