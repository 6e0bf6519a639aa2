"""API module for Cricket Tracker.

- Validates inputs, calls the match service
- Returns payloads for the UI
- Forbidden: stats computation, direct table access
"""
