"""Shared pytest fixtures for tigerfive tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tigerfive.db.schema import Base
from tigerfive.mirror.client import RemoteMirror
from tigerfive.models.domain import RoundEntity
from tigerfive.state import AppState


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session_factory(engine):
    """Session factory bound to the test engine."""
    return sessionmaker(bind=engine)


@pytest.fixture
def session(session_factory):
    """Create a database session for testing."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def disabled_mirror():
    """Mirror with no base URL: records failures, never touches the network."""
    mirror = RemoteMirror(None)
    yield mirror
    mirror.shutdown(wait=True)


@pytest.fixture
def app_state(session_factory, disabled_mirror):
    """Application state over the in-memory store."""
    return AppState.create(session_factory, disabled_mirror)


def make_round(
    round_id: int = 1,
    date: str = "2024-06-01",
    course: str = "Pebble Creek",
    total_score: int = 85,
    **counts: int,
) -> RoundEntity:
    """Build a round with its Tiger Five frozen from the given counts."""
    return RoundEntity.create(
        id=round_id,
        date=date,
        course=course,
        totalScore=total_score,
        **counts,
    )


@pytest.fixture
def round_factory():
    """Factory fixture for rounds."""
    return make_round
