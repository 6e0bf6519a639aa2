"""Pydantic models for the Cricket Tracker API.

JSON uses camelCase field names (matchDate, runsScored, ...); Python
code uses the snake_case attribute names.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from cricket_tracker.models.domain import MatchFields

MAX_RUNS = 500
MAX_BALLS = 500
MAX_WICKETS = 10
MAX_OVERS = 50
MAX_CATCHES = 10


class CamelModel(BaseModel):
    """Base model serializing to camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MatchInput(CamelModel):
    """Match submission from the add/edit form.

    Numeric fields default to 0 when absent.
    """

    match_date: date
    opponent: str = Field(min_length=2, max_length=50)
    runs_scored: int = Field(default=0, ge=0, le=MAX_RUNS)
    balls_faced: int = Field(default=0, ge=0, le=MAX_BALLS)
    wickets_taken: int = Field(default=0, ge=0, le=MAX_WICKETS)
    overs_bowled: float = Field(default=0.0, ge=0, le=MAX_OVERS)
    runs_conceded: int = Field(default=0, ge=0, le=MAX_RUNS)
    catches: int = Field(default=0, ge=0, le=MAX_CATCHES)

    @field_validator("match_date", mode="before")
    @classmethod
    def _drop_time_of_day(cls, value: object) -> object:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and len(value) > 10:
            return datetime.fromisoformat(value).date()
        return value

    @field_validator("match_date")
    @classmethod
    def _not_in_future(cls, value: date) -> date:
        if value > date.today():
            raise ValueError("Match date cannot be in the future")
        return value

    @field_validator("opponent", mode="before")
    @classmethod
    def _strip_opponent(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("overs_bowled")
    @classmethod
    def _balls_in_over(cls, value: float) -> float:
        # Fraction digit counts balls: 4.5 is four overs and five balls
        balls = round((value % 1) * 10)
        if balls > 5:
            raise ValueError("Invalid overs format (decimal part should be 0-5, e.g., 4.5)")
        return value

    @model_validator(mode="after")
    def _runs_within_balls(self) -> MatchInput:
        if "balls_faced" in self.model_fields_set and self.runs_scored > self.balls_faced * 6:
            raise ValueError("Runs cannot exceed 6 times balls faced")
        return self

    def to_fields(self) -> MatchFields:
        """Convert to the domain input type."""
        return MatchFields(
            match_date=self.match_date,
            opponent=self.opponent,
            runs_scored=self.runs_scored,
            balls_faced=self.balls_faced,
            wickets_taken=self.wickets_taken,
            overs_bowled=self.overs_bowled,
            runs_conceded=self.runs_conceded,
            catches=self.catches,
        )


class MatchDetail(CamelModel):
    """Stored match for API responses."""

    match_id: str = Field(alias="id")
    match_date: date
    opponent: str
    runs_scored: int
    balls_faced: int
    wickets_taken: int
    overs_bowled: float
    runs_conceded: int
    catches: int
    created_at: datetime | None
    updated_at: datetime | None


class MatchCreatedResponse(CamelModel):
    """Response for match creation."""

    match_id: str = Field(alias="id")


class PlayerStatsDetail(CamelModel):
    """Career stats snapshot for API responses."""

    subject_id: str
    total_matches: int
    total_runs: int
    total_balls_faced: int
    total_wickets: int
    total_overs_bowled: float
    total_runs_conceded: int
    total_catches: int
    batting_average: float
    strike_rate: float
    bowling_average: float
    economy_rate: float
    updated_at: datetime | None


class TrendPointDetail(CamelModel):
    """One point on the performance trend chart."""

    match_date: date
    opponent: str
    runs_scored: int
    wickets_taken: int


class TrendOverview(CamelModel):
    """Chart data: recent performance plus career contribution split."""

    points: list[TrendPointDetail]
    contribution: dict[str, int]
