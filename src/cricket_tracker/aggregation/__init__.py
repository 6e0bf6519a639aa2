"""Aggregation module for career statistics.

- Reads matches and produces the career stats snapshot and chart series
- Forbidden: match mutation, duplicate checks
"""
