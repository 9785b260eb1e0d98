"""Database repositories."""

from snippetbox.db.repositories.user import UserRepository
from snippetbox.db.repositories.snippet import SnippetRepository

__all__ = [
    "UserRepository",
    "SnippetRepository",
]
