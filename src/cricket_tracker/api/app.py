"""FastAPI application factory."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Generator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from cricket_tracker import __version__, config
from cricket_tracker.db.repo import DbSession
from cricket_tracker.db.session import get_session, init_db


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(request.app.state.db_path)
    try:
        yield session
    finally:
        session.close()


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        db_path: Optional path to database file. Defaults to config.DB_PATH.

    Returns:
        Configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        config.validate_config()
        config.configure_logging()
        init_db(app.state.db_path)
        yield

    app = FastAPI(
        title="Cricket Tracker API",
        description="Personal match log and career statistics",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_path = db_path if db_path is not None else config.DB_PATH

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from cricket_tracker.api.routes import matches, stats

    app.include_router(matches.router, prefix="/api")
    app.include_router(stats.router, prefix="/api")

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
