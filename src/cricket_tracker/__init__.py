"""Cricket Tracker: personal match log and career statistics."""

__version__ = "0.1.0"
