"""Puzzle units and their registry."""

from .base import InputNotReady, TrialResult, Unit, UnitResult
from .registry import DuplicateUnit, UnitNotRegistered, UnitRegistry

__all__ = [
    "DuplicateUnit",
    "InputNotReady",
    "TrialResult",
    "Unit",
    "UnitNotRegistered",
    "UnitRegistry",
    "UnitResult",
]
