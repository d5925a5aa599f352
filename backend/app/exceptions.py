"""
ArticleDesk Backend — Custom Exception Hierarchy
==================================================

What:  Application-specific exceptions for the article pages.
Why:   Services raise these instead of returning error dicts; the global
       handlers registered in main.py turn them into structured JSON
       responses with the right HTTP status code.
How:   Each exception carries a user-facing message and an optional context dict.
Who:   Raised by services and routes; caught by global handlers.

Exception Hierarchy:
    ArticleDeskError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    └── NotFoundError     → 404 Not Found
"""

from typing import Any, Dict, Optional


class ArticleDeskError(Exception):
    """
    Base exception for all ArticleDesk application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ArticleDeskError):
    """
    Raised when a submitted article form fails validation.

    HTTP:    400 Bad Request

    The message is deliberately generic ("The form contains errors!"); the
    page is redisplayed in editing mode with the submitted values, without
    field-level detail.
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


class NotFoundError(ArticleDeskError):
    """
    Raised when a requested article does not exist.

    What:    The store returned None for the requested identifier.
    When:    GET /articles/{id} with an id no record carries.
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
