"""Domain models for Cricket Tracker.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy and used throughout
the application for clean separation from the database layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


# ============================================================================
# Match Domain
# ============================================================================


@dataclass
class MatchFields:
    """User-supplied content of a match, without store-assigned fields."""

    match_date: date
    opponent: str
    runs_scored: int = 0
    balls_faced: int = 0
    wickets_taken: int = 0
    overs_bowled: float = 0.0
    runs_conceded: int = 0
    catches: int = 0


@dataclass
class MatchEntity:
    """Domain model for a recorded match."""

    match_id: str
    subject_id: str
    match_date: date
    opponent: str
    runs_scored: int = 0
    balls_faced: int = 0
    wickets_taken: int = 0
    overs_bowled: float = 0.0
    runs_conceded: int = 0
    catches: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ============================================================================
# Career Stats Domain
# ============================================================================


@dataclass
class PlayerStatsEntity:
    """Career stats snapshot for one subject."""

    subject_id: str
    total_matches: int = 0
    total_runs: int = 0
    total_balls_faced: int = 0
    total_wickets: int = 0
    total_overs_bowled: float = 0.0
    total_runs_conceded: int = 0
    total_catches: int = 0
    batting_average: float = 0.0
    strike_rate: float = 0.0
    bowling_average: float = 0.0
    economy_rate: float = 0.0
    updated_at: datetime | None = None
