"""Pydantic schemas for request/response validation."""

from snippetbox.schemas.user import UserCreate, UserIdResponse, UserLogin
from snippetbox.schemas.snippet import PERMITTED_EXPIRES_DAYS, SnippetCreate, SnippetResponse

__all__ = [
    "UserCreate",
    "UserIdResponse",
    "UserLogin",
    "PERMITTED_EXPIRES_DAYS",
    "SnippetCreate",
    "SnippetResponse",
]
