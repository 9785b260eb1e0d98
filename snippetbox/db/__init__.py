"""Database engine, schema helpers and repositories."""
