"""2015 units."""

from .day01 import Day01
from .day02 import Day02

UNITS = [Day01, Day02]

__all__ = ["Day01", "Day02", "UNITS"]
