"""Database session management.

Provides session factory for SQLite database access with proper
thread-safety for FastAPI concurrency.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from cricket_tracker import config
from cricket_tracker.db.schema import Base

# Engines and session factories are cached per resolved database path
_engine_cache: dict[str, Engine] = {}
_session_factory_cache: dict[str, sessionmaker] = {}


def _resolve(db_path: Path | None) -> Path:
    return Path(db_path) if db_path is not None else config.DB_PATH


def _cache_key(db_path: Path) -> str:
    return str(db_path) if _is_memory(db_path) else str(db_path.resolve())


def _is_memory(db_path: Path) -> bool:
    return str(db_path) == ":memory:"


def get_engine(db_path: Path | None = None) -> Engine:
    """Get SQLAlchemy engine for the database.

    Engines are cached by resolved db_path. File databases use the default
    pool, so each session checks out its own connection and closing one
    session never rolls back another's pending writes. ":memory:" uses
    StaticPool, since every connection would otherwise see its own empty
    database. check_same_thread=False lets FastAPI worker threads use
    pooled connections.

    Args:
        db_path: Path to SQLite database file, or ":memory:".
            Defaults to config.DB_PATH.

    Returns:
        SQLAlchemy engine instance (cached).
    """
    db_path = _resolve(db_path)
    cache_key = _cache_key(db_path)

    if cache_key in _engine_cache:
        return _engine_cache[cache_key]

    if _is_memory(db_path):
        engine = create_engine(
            "sqlite:///:memory:",
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(
            f"sqlite:///{db_path}",
            echo=False,
            connect_args={"check_same_thread": False},
        )
    _engine_cache[cache_key] = engine

    return engine


def _get_session_factory(db_path: Path | None = None) -> sessionmaker:
    db_path = _resolve(db_path)
    cache_key = _cache_key(db_path)

    if cache_key in _session_factory_cache:
        return _session_factory_cache[cache_key]

    factory = sessionmaker(bind=get_engine(db_path))
    _session_factory_cache[cache_key] = factory

    return factory


def get_session(db_path: Path | None = None) -> Session:
    """Get a database session.

    Caller is responsible for closing the session. For automatic
    resource management, use get_db_session() instead.
    """
    factory = _get_session_factory(db_path)
    return factory()


@contextmanager
def get_db_session(db_path: Path | None = None) -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup.

    Commits on successful exit, rolls back on exception, and always
    closes the session.

    Example:
        with get_db_session() as session:
            add_match(session, data)
    """
    session = get_session(db_path)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(db_path: Path | None = None) -> None:
    """Create tables if they do not exist yet."""
    engine = get_engine(db_path)
    Base.metadata.create_all(engine)
