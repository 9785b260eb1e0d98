"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from snippetbox.models.user import User  # noqa: F401
from snippetbox.models.snippet import Snippet  # noqa: F401
