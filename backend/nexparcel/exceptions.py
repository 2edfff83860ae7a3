"""
NexParcel Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the different error scenarios.
How:   Each exception carries a user-facing message and an optional context
       dict. Global exception handlers (registered in main.py) turn them into
       structured JSON error responses with the matching HTTP status code.
Who:   Raised by services, the authorization gate, and middleware.

Exception Hierarchy:
    NexParcelError (base)
    ├── AuthenticationError      → 401 Unauthorized (missing/invalid token)
    ├── AuthorizationError       → 403 Forbidden (role mismatch)
    ├── ValidationError          → 400 Bad Request (malformed id, bad input)
    ├── NotFoundError            → 404 Not Found
    ├── ConflictError            → 409 Conflict (unique key violated)
    ├── PaymentProviderError     → 502 Bad Gateway (Stripe failed)
    ├── DatabaseError            → 500 Internal Server Error
    └── RateLimitExceededError   → 429 Too Many Requests
"""

from typing import Any, Dict, Optional


class NexParcelError(Exception):
    """
    Base exception for all NexParcel application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned for 5xx errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class AuthenticationError(NexParcelError):
    """
    Raised when a protected route is called without a usable token.

    When:    Authorization header missing, signature invalid, token expired.
    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "unauthorized access",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AuthorizationError(NexParcelError):
    """
    Raised when the caller is authenticated but lacks the required role.

    When:    Admin-only or Delivery Men-only route called by another role.
    HTTP:    403 Forbidden
    """

    def __init__(
        self,
        required_role: Optional[str] = None,
        message: str = "forbidden access",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if required_role:
            ctx["required_role"] = required_role
        super().__init__(message=message, context=ctx)
        self.required_role = required_role


class ValidationError(NexParcelError):
    """
    Raised when client input fails validation.

    When:    Booking id does not parse, identity document lacks an email.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid id format",
            "details": {"field": "id"}
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


class NotFoundError(NexParcelError):
    """
    Raised when a requested resource does not exist.

    When:    Unknown user email, unknown booking id. Also raised by updates,
             which never create a document for an unmatched key.
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


class ConflictError(NexParcelError):
    """
    Raised when a write violates a unique key.

    When:    Two concurrent signups with the same email both pass the soft
             duplicate check; the unique constraint rejects the second.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "This email already in used.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class PaymentProviderError(NexParcelError):
    """
    Raised when the payment provider rejects or fails a request.

    When:    Invalid amount, bad API key, network error talking to Stripe.
    HTTP:    502 Bad Gateway

    No retry is attempted; the client decides whether to try again.
    """

    def __init__(
        self,
        message: str = "Payment provider request failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(NexParcelError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Details are
    logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(NexParcelError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests (with Retry-After header)
    """

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
