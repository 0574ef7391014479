"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    InkpostException (base)
       │
       ├── AuthenticationError (401)    ← Missing/invalid/expired token, bad OAuth code
       ├── AuthorizationError (403)     ← Not the owner of a blog or comment
       ├── NotFoundError (404)          ← Resource not found
       │      ├── UserNotFoundError
       │      ├── BlogNotFoundError
       │      └── CommentNotFoundError
       ├── ValidationError (400)        ← Invalid input data (e.g. missing image)
       ├── ConflictError (409)          ← Resource already exists
       └── ServiceUnavailableError (503) ← External service down
              └── ExternalServiceError

Usage:
======
    from inkpost.shared.core.exceptions import BlogNotFoundError, ValidationError

    raise BlogNotFoundError(blog_id)
    # Results in: {"error": {"code": "NOT_FOUND", "message": "Blog with id '42' not found"}}

    raise ValidationError("Image file is required", details={"field": "file"})

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Blog with id '42' not found",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class InkpostException(Exception):
    """
    Base exception for all Inkpost application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(InkpostException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - Missing or invalid bearer token
    - Token expired or malformed
    - Identity provider rejected the authorization code
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(InkpostException):
    """
    Authorization failed error (403 Forbidden).

    Raised when user is authenticated but does not own the resource.
    """

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(InkpostException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("User", user_id)
        # Message: "User with id 'abc-123' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: str) -> None:
        super().__init__(resource="User", resource_id=user_id)


class BlogNotFoundError(NotFoundError):
    """Blog not found error."""

    def __init__(self, blog_id: int | str) -> None:
        super().__init__(resource="Blog", resource_id=str(blog_id))


class CommentNotFoundError(NotFoundError):
    """Comment not found error."""

    def __init__(self, comment_id: int | str) -> None:
        super().__init__(resource="Comment", resource_id=str(comment_id))


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(InkpostException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation outside of the request schema
    (e.g. an upload that is not an image).
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class ConflictError(InkpostException):
    """
    Resource conflict error (409 Conflict).

    Raised when operation conflicts with existing resource.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE ERRORS (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(InkpostException):
    """
    Service temporarily unavailable error (503).

    Raised when a dependency (S3, Google, the user service) cannot be reached.
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code="SERVICE_UNAVAILABLE",
            details=details,
        )


class ExternalServiceError(ServiceUnavailableError):
    """
    External service error.

    More specific error for external API failures.
    """

    def __init__(
        self,
        service_name: str,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        msg = message or f"{service_name} service error"
        extra_details = details or {}
        extra_details["service"] = service_name
        super().__init__(message=msg, details=extra_details)
