"""
Shared API dependencies.

Reusable FastAPI dependencies for repositories and authentication.
"""

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy import Engine

from snippetbox.db.repositories import SnippetRepository, UserRepository
from snippetbox.db.session import engine

# Session key holding the id of the logged-in user
SESSION_USER_KEY = "authenticated_user_id"


def get_engine() -> Engine:
    """Return the process-wide engine."""
    return engine


def get_user_repository(db: Engine = Depends(get_engine)) -> UserRepository:
    return UserRepository(db)


def get_snippet_repository(db: Engine = Depends(get_engine)) -> SnippetRepository:
    return SnippetRepository(db)


def get_current_user_id(request: Request, users: UserRepository = Depends(get_user_repository)) -> int:
    """Return the session's user id, or 401 if nobody (still existing) is logged in."""
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
    if not users.exists(user_id):
        request.session.pop(SESSION_USER_KEY, None)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
    return user_id
