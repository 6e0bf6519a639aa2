"""Database schema for Cricket Tracker.

Two tables: the append/edit/delete match log and the per-subject
career stats snapshot that is rebuilt after every match write.
"""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Float, Integer, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Match(Base):
    """One played match for a subject.

    created_at/updated_at come from the database clock, not the client.
    """

    __tablename__ = "matches"

    match_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    subject_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    match_date: Mapped[date] = mapped_column(Date, nullable=False)
    opponent: Mapped[str] = mapped_column(String(64), nullable=False)

    # Batting
    runs_scored: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    balls_faced: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Bowling (overs_bowled fraction digit counts balls, 0-5)
    wickets_taken: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    overs_bowled: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    runs_conceded: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Fielding
    catches: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.current_timestamp()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp(),
    )


class PlayerStats(Base):
    """Career stats snapshot, one row per subject.

    Invariant: always a pure function of the subject's matches.
    Rows are replaced wholesale, never patched field by field.
    """

    __tablename__ = "player_stats"

    subject_id: Mapped[str] = mapped_column(String(64), primary_key=True)

    total_matches: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_runs: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_balls_faced: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_wickets: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_overs_bowled: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    total_runs_conceded: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_catches: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    batting_average: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    strike_rate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    bowling_average: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    economy_rate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp(),
    )
