"""
User database model.

Defines the users table for registration and authentication.
"""

import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, UniqueConstraint, func
from sqlmodel import Field, SQLModel

# Name of the unique constraint on users.email. Duplicate detection matches on it.
UNIQUE_EMAIL_CONSTRAINT = "users_uc_email"


class User(SQLModel, table=True):
    """
    Registered user.

    Stores the bcrypt hash of the password, never the plaintext.
    """
    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name=UNIQUE_EMAIL_CONSTRAINT),)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, nullable=False)
    email: str = Field(max_length=255, nullable=False)
    hashed_password: str = Field(max_length=60, nullable=False)

    # Set by the database on insert
    created: Optional[datetime.datetime] = Field(default=None, sa_column=Column(
        DateTime(timezone=True), nullable=False, server_default=func.current_timestamp()), )
