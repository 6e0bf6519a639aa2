"""Shared pytest fixtures for cricket_tracker tests."""

from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from cricket_tracker.db.schema import Base
from cricket_tracker.models.domain import MatchFields


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def scenario_fields() -> list[MatchFields]:
    """Three matches: a batting innings, a bowling spell, an all-round game."""
    return [
        MatchFields(
            match_date=date(2025, 1, 10),
            opponent="India",
            runs_scored=50,
            balls_faced=40,
            catches=1,
        ),
        MatchFields(
            match_date=date(2025, 1, 17),
            opponent="Australia",
            wickets_taken=3,
            overs_bowled=4.0,
            runs_conceded=20,
        ),
        MatchFields(
            match_date=date(2025, 1, 24),
            opponent="England",
            runs_scored=30,
            balls_faced=20,
            wickets_taken=1,
            overs_bowled=2.3,
            runs_conceded=15,
            catches=2,
        ),
    ]
