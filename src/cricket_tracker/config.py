"""Runtime configuration for Cricket Tracker.

Values come from environment variables; a ``.env`` file in the working
directory is loaded first if present.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


# -------------------------
# Storage
# -------------------------
DB_PATH: Path = Path(_get_env("CRICKET_TRACKER_DB_PATH", "data/cricket_tracker.db"))

# Fixed subject key for the single-user tracker
SUBJECT_ID: str = _get_env("CRICKET_TRACKER_SUBJECT_ID", "local-player")

# -------------------------
# API / presentation
# -------------------------
CORS_ORIGINS: list[str] = [
    origin.strip()
    for origin in _get_env(
        "CRICKET_TRACKER_CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    ).split(",")
    if origin.strip()
]

RECENT_MATCHES_LIMIT: int = _get_env_int("CRICKET_TRACKER_RECENT_LIMIT", 5)
TREND_MATCHES_LIMIT: int = _get_env_int("CRICKET_TRACKER_TREND_LIMIT", 10)

LOG_LEVEL: str = _get_env("CRICKET_TRACKER_LOG_LEVEL", "INFO").upper()


def validate_config() -> None:
    if not SUBJECT_ID:
        raise RuntimeError("CRICKET_TRACKER_SUBJECT_ID must not be empty")

    if RECENT_MATCHES_LIMIT <= 0:
        raise RuntimeError("CRICKET_TRACKER_RECENT_LIMIT must be positive")

    if TREND_MATCHES_LIMIT <= 0:
        raise RuntimeError("CRICKET_TRACKER_TREND_LIMIT must be positive")

    if LOG_LEVEL not in logging.getLevelNamesMapping():
        raise RuntimeError(f"Unknown CRICKET_TRACKER_LOG_LEVEL: {LOG_LEVEL}")


def configure_logging(level: str | None = None) -> None:
    """Apply the configured log level to the package logger."""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("cricket_tracker").setLevel(level or LOG_LEVEL)
