"""
Domain errors raised by the persistence layer.

Hierarchy::

    SnippetboxError (base)
    ├── DuplicateIdentityError   email already registered
    ├── InvalidCredentialsError  unknown email or wrong password
    ├── NotFoundError            missing or expired record
    └── StorageError             any unexpected backend failure

Repositories raise these and never log. The web layer maps them to
responses; only :class:`StorageError` is logged, and its message is
never returned to the client.
"""

from typing import Any, Dict, Optional


class SnippetboxError(Exception):
    """
    Base exception for all domain errors.

    Attributes:
        message: Human-readable description, safe to show to a user
        context: Extra debugging details for logs only
    """

    def __init__(self, message: str = "An unexpected error occurred", context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DuplicateIdentityError(SnippetboxError):
    """Raised when registration hits the unique email constraint."""

    def __init__(self, email: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        if email:
            ctx["email"] = email
        super().__init__(message="Email address is already in use", context=ctx)


class InvalidCredentialsError(SnippetboxError):
    """
    Raised when authentication fails.

    Unknown email and wrong password produce the same error so callers
    cannot tell which accounts exist.
    """

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Email or password is incorrect", context=context)


class NotFoundError(SnippetboxError):
    """Raised when a record does not exist or is no longer active."""

    def __init__(self, resource: str = "record", resource_id: Optional[Any] = None,
                 context: Optional[Dict[str, Any]] = None):
        message = f"No matching {resource} found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StorageError(SnippetboxError):
    """
    Raised when the database or the hashing library fails unexpectedly.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, message: str = "A storage error occurred", context: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, context=context)
