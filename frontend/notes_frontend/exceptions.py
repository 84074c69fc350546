"""
Notes Frontend - Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for the frontend server and the
       Notes API client.
How:   Each exception carries a message and optional context dict.
       The view catches RemoteCallError at the call site; anything that
       reaches a route is turned into a JSON error by the handlers in main.py.

Exception Hierarchy:
    NotesFrontendError (base)
    ├── RemoteCallError   → caught by the view, never reaches a route
    └── ValidationError   → 400 Bad Request
"""

from typing import Any, Dict, Optional


class NotesFrontendError(Exception):
    """
    Base exception for all Notes Frontend errors.

    Attributes:
        message:  Human-readable error description (safe to return in API response)
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


class RemoteCallError(NotesFrontendError):
    """
    Raised when a call to the Notes API fails.

    What:    The single failure kind of the client: "remote call failed".
    When:    Network error, timeout, non-2xx status, body that is not JSON,
             or JSON of the wrong shape. The concrete cause is kept in
             `context["cause"]` for the log; callers treat all causes alike.

    Attributes:
        operation: Which API operation failed ("list_notes" / "create_note")
        kind:      Always "remote_call_failed"
    """

    kind = "remote_call_failed"

    def __init__(
        self,
        operation: str,
        message: str = "Notes API call failed",
        cause: Optional[str] = None,
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["operation"] = operation
        if cause:
            ctx["cause"] = cause
        if status_code is not None:
            ctx["status_code"] = status_code
        super().__init__(message=message, context=ctx)
        self.operation = operation
        self.status_code = status_code


class ValidationError(NotesFrontendError):
    """
    Raised when a request to the frontend server is malformed.

    HTTP: 400 Bad Request. Note text itself is never validated.
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
