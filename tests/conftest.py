"""Shared fixtures: in-memory database, controllable clock, fast hashing."""

import datetime
import os

# Settings are read at import time.
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

import snippetbox.db.base  # noqa: F401
from snippetbox.core import security


class FrozenClock:
    """Clock returning a fixed UTC time until advanced."""

    def __init__(self, now: datetime.datetime):
        self.now = now

    def __call__(self) -> datetime.datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += datetime.timedelta(**kwargs)


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def bare_engine():
    """Engine whose database has no tables."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    yield engine
    engine.dispose()


@pytest.fixture
def clock():
    return FrozenClock(datetime.datetime(2026, 10, 18, 12, 0, 0, tzinfo=datetime.timezone.utc))


@pytest.fixture
def fast_hashing(monkeypatch):
    """Use the minimum bcrypt cost so tests stay quick."""
    monkeypatch.setattr(security, "BCRYPT_COST", 4)
