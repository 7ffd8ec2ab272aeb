"""Advent Harness - fetch, cache and time two-part daily puzzles."""

__version__ = "0.1.0"
