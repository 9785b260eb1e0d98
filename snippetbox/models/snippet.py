"""
Snippet database model.

A snippet is active while ``expires`` is in the future.
"""

import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, Text
from sqlmodel import Field, SQLModel


class Snippet(SQLModel, table=True):
    """A short text snippet with an expiry date."""

    __tablename__ = "snippets"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=100, nullable=False)
    content: str = Field(sa_column=Column(Text, nullable=False))

    # Timestamps (aware UTC)
    created: datetime.datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    expires: datetime.datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False, index=True))
