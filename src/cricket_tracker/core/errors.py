"""Errors raised by the match store and stats pipeline.

Field validation errors are pydantic's own ValidationError and never
reach this layer.
"""

from __future__ import annotations


class DuplicateRecordError(Exception):
    """Raised when a match against the same opponent on the same day exists."""

    def __init__(self, opponent: str):
        self.opponent = opponent
        super().__init__(f"A match against {opponent} on this date already exists")


class NotFoundError(Exception):
    """Raised when an update or delete targets a match that does not exist."""

    def __init__(self, match_id: str):
        self.match_id = match_id
        super().__init__(f"Match not found: {match_id}")


class StoreError(Exception):
    """Raised when the persistence layer fails."""

    pass


class StatsRefreshError(StoreError):
    """Raised when stats recomputation fails after a match write succeeded.

    The match write is not rolled back; match_id identifies it.
    """

    def __init__(self, message: str, match_id: str | None = None):
        self.match_id = match_id
        super().__init__(message)
