"""Registered puzzle solutions, grouped by year."""

from typing import Dict, List, Type

from ..units import Unit, UnitRegistry
from . import year2015

GROUPS: Dict[str, List[Type[Unit]]] = {
    "2015": year2015.UNITS,
}


def build_registry(group: str) -> UnitRegistry:
    """Build the registry for one year. Unknown years give an empty registry."""
    return UnitRegistry.from_units(GROUPS.get(group, []))
