"""Engine and session plumbing for the local byte store.

One SQLite file per configured path; engines and session factories are
cached per resolved path so every AppState over that path shares them.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tigerfive.config import DEFAULT_DB_PATH
from tigerfive.db.schema import Base

SessionFactory = Callable[[], Session]

# Module-level engine cache for connection pooling
_engine_cache: dict[str, Engine] = {}

# Module-level session factory cache
_session_factory_cache: dict[str, sessionmaker] = {}


def _cache_key(db_path: Path | None) -> tuple[Path, str]:
    path = Path(db_path) if db_path is not None else DEFAULT_DB_PATH
    return path, str(path.resolve())


def get_engine(db_path: Path | None = None) -> Engine:
    """Get SQLAlchemy engine for the database.

    Engines are cached by resolved db_path. Subsequent calls with the same
    path return the cached engine.

    Uses StaticPool and check_same_thread=False so the API worker threads
    share one SQLite connection.

    Args:
        db_path: Path to SQLite database file. Defaults to data/tigerfive.db.

    Returns:
        SQLAlchemy engine instance (cached).
    """
    db_path, cache_key = _cache_key(db_path)
    if cache_key in _engine_cache:
        return _engine_cache[cache_key]

    db_path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    _engine_cache[cache_key] = engine

    return engine


def get_session_factory(db_path: Path | None = None) -> sessionmaker:
    """Session factory bound to the cached engine for db_path."""
    db_path, cache_key = _cache_key(db_path)
    if cache_key in _session_factory_cache:
        return _session_factory_cache[cache_key]

    engine = get_engine(db_path)
    factory = sessionmaker(bind=engine)
    _session_factory_cache[cache_key] = factory

    return factory


@contextmanager
def session_scope(factory: SessionFactory) -> Generator[Session, None, None]:
    """One transaction over the byte store: commit on success, roll back on error.

    Example:
        with session_scope(factory) as session:
            repo.put_value(session, ROUNDS_KEY, payload)
    """
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(db_path: Path | None = None) -> sessionmaker:
    """Create the kv_store table if needed and return the session factory."""
    engine = get_engine(db_path)
    Base.metadata.create_all(engine)
    return get_session_factory(db_path)
