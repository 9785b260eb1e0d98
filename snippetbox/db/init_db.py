"""
Database initialization.

Creates all tables for local development. Production schemas are
managed by Alembic migrations.
"""

from sqlalchemy import Engine
from sqlmodel import SQLModel

from snippetbox.db.session import describe_engine, engine


def init_db(target: Engine = engine) -> None:
    """Create the users and snippets tables if they do not exist."""

    # Import all models so SQLModel.metadata has them
    import snippetbox.db.base  # noqa: F401

    print(f"Creating database tables on {describe_engine(target)}...")
    SQLModel.metadata.create_all(target)
    print("✓ Tables created successfully")


if __name__ == "__main__":
    init_db()
