"""
Snippet repository.

Handles database operations for :class:`Snippet`. Expiry is a
query-time filter: expired rows are never deleted, only hidden.
"""

import datetime
from typing import Callable

from sqlalchemy import Engine, desc
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from snippetbox.core.exceptions import NotFoundError, StorageError
from snippetbox.models.snippet import Snippet

# Maximum number of snippets returned by latest()
LATEST_LIMIT = 10


def utc_now() -> datetime.datetime:
    """Current time as an aware UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc)


class SnippetRepository:
    """Repository for Snippet database operations."""

    def __init__(self, engine: Engine, clock: Callable[[], datetime.datetime] = utc_now):
        self.engine = engine
        self.clock = clock

    def insert(self, title: str, content: str, expires_days: int) -> int:
        """
        Store a new snippet that expires *expires_days* days from now.

        Returns the generated snippet id. Zero or negative
        *expires_days* stores a snippet that is never active.
        """
        now = self.clock()
        try:
            expires = now + datetime.timedelta(days=expires_days)
        except OverflowError as exc:
            raise StorageError("Snippet expiry is out of range", context={"expires_days": expires_days}) from exc

        snippet = Snippet(title=title, content=content, created=now, expires=expires)
        try:
            with Session(self.engine) as session:
                session.add(snippet)
                session.commit()
                session.refresh(snippet)
                return snippet.id
        except SQLAlchemyError as exc:
            raise StorageError("Failed to insert snippet") from exc

    def get(self, snippet_id: int) -> Snippet:
        """
        Fetch an active snippet by id.

        Raises :class:`NotFoundError` if the snippet does not exist or
        has expired; the two cases are not distinguished.
        """
        statement = select(Snippet).where(Snippet.id == snippet_id, Snippet.expires > self.clock())
        try:
            with Session(self.engine) as session:
                snippet = session.exec(statement).first()
        except SQLAlchemyError as exc:
            raise StorageError("Failed to fetch snippet") from exc

        if snippet is None:
            raise NotFoundError("snippet", snippet_id)
        return snippet

    def latest(self) -> list[Snippet]:
        """Return up to ten active snippets, newest first."""
        statement = (select(Snippet).where(Snippet.expires > self.clock()).order_by(desc(Snippet.id))
                     .limit(LATEST_LIMIT))
        try:
            with Session(self.engine) as session:
                return list(session.exec(statement).all())
        except SQLAlchemyError as exc:
            raise StorageError("Failed to list snippets") from exc
