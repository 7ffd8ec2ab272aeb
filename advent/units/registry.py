"""Registration table mapping day numbers to unit factories."""

import logging
from typing import Callable, Dict, Iterable, List, Tuple, Type

from .base import Unit

logger = logging.getLogger(__name__)

UnitFactory = Callable[[], Unit]


class UnitNotRegistered(LookupError):
    """No unit was registered for this day."""

    def __init__(self, number: int):
        self.number = number
        super().__init__(f"No unit was provided for day {number}")


class DuplicateUnit(ValueError):
    """Two registrations claimed the same day."""

    def __init__(self, number: int):
        self.number = number
        super().__init__(
            f"Two units were provided that both claimed to be day {number}. "
            "Make sure you only provide each day once."
        )


class UnitRegistry:
    """
    Explicit table of unit factories.

    Each factory is a zero-argument callable returning a fresh unit; a Unit
    subclass is its own factory. ``create`` is called once per trial and once
    per real run so instances never share state.
    """

    def __init__(self, entries: Iterable[Tuple[int, UnitFactory]] = ()):
        self._factories: Dict[int, UnitFactory] = {}
        for number, factory in entries:
            self.register(number, factory)

    @classmethod
    def from_units(cls, units: Iterable[Type[Unit]]) -> "UnitRegistry":
        registry = cls()
        for unit_cls in units:
            registry.add(unit_cls)
        return registry

    def register(self, number: int, factory: UnitFactory) -> None:
        logger.debug("Adding unit %r for day %d", factory, number)
        if number in self._factories:
            logger.error("Duplicate day %d", number)
            raise DuplicateUnit(number)
        self._factories[number] = factory

    def add(self, unit_cls: Type[Unit]) -> Type[Unit]:
        """Register a Unit subclass under its ``number``."""
        if not (isinstance(unit_cls, type) and issubclass(unit_cls, Unit)):
            raise TypeError(f"{unit_cls!r} is not a subclass of Unit")
        self.register(unit_cls.number, unit_cls)
        return unit_cls

    def create(self, number: int) -> Unit:
        """Build a fresh unit for ``number``."""
        try:
            factory = self._factories[number]
        except KeyError:
            raise UnitNotRegistered(number) from None
        return factory()

    def numbers(self) -> List[int]:
        return sorted(self._factories)

    def __contains__(self, number: object) -> bool:
        return number in self._factories

    def __len__(self) -> int:
        return len(self._factories)
