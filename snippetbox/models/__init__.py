"""SQLModel database models."""

from snippetbox.models.user import User, UNIQUE_EMAIL_CONSTRAINT
from snippetbox.models.snippet import Snippet

__all__ = [
    "User",
    "UNIQUE_EMAIL_CONSTRAINT",
    "Snippet",
]
