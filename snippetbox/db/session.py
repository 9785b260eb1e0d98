"""
Database engine management.

The engine owns the connection pool. It is created once per process
and lent to every repository; repositories open their own short-lived
sessions from it.
"""

from typing import Any

from sqlalchemy import Engine, make_url
from sqlmodel import create_engine

from snippetbox.core.config import settings


def build_engine(database_url: str) -> Engine:
    """
    Create a pooled engine for *database_url*.

    SQLite gets a thread-shareable connection and no pool sizing;
    server databases get the configured pool and connect timeout.
    """
    url = make_url(database_url)
    options: dict[str, Any] = {
        "echo": settings.DEBUG,  # Log SQL queries in debug mode
        "pool_pre_ping": True,   # Verify connections before using
    }
    if url.get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_size"] = settings.DATABASE_POOL_SIZE
        options["max_overflow"] = settings.DATABASE_MAX_OVERFLOW
        options["connect_args"] = {"connect_timeout": settings.DATABASE_CONNECT_TIMEOUT}
    return create_engine(url, **options)


def describe_engine(target: Engine) -> str:
    """Engine URL with the password masked, for logs."""
    return target.url.render_as_string(hide_password=True)


# Process-wide engine
engine = build_engine(settings.DATABASE_URL)
