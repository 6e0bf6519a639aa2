"""Service module: the operations the UI and API call.

- Sequences duplicate check, persistence and stats recomputation
- Forbidden: HTTP concerns, presentation formatting
"""
