"""Base unit interface and the trial/execute lifecycle."""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Optional, Tuple

from ..fetch import ArtifactFetcher, ArtifactKey
from ..log import scoped

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnitResult:
    """Answers and timings of one run of both parts."""
    part1: str
    part1_time: timedelta
    part2: str
    part2_time: timedelta


@dataclass(frozen=True)
class TrialResult(UnitResult):
    """A self-test run. Correctness is None when no answer is known."""
    part1_correct: Optional[bool] = None
    part2_correct: Optional[bool] = None

    @property
    def passed(self) -> bool:
        return self.part1_correct is not False and self.part2_correct is not False


class InputNotReady(RuntimeError):
    """The unit's input was read before one was set."""
    pass


def _timed(func: Callable[[], Any]) -> Tuple[str, timedelta]:
    start = time.perf_counter()
    answer = func()
    elapsed = time.perf_counter() - start
    return str(answer), timedelta(seconds=elapsed)


def _check(answer: str, expected: Optional[str]) -> Optional[bool]:
    if expected is None:
        return None
    return answer == expected


class Unit(ABC):
    """
    Base class for all puzzle units.

    Subclasses set ``group`` and ``number`` and implement ``part1`` and
    ``part2``, reading their puzzle from ``self.input``. Both parts run on the
    same instance, so state built in part 1 is visible in part 2. Use a fresh
    instance for each trial and each real run.
    """

    group: str = ""
    number: int = 0
    title: Optional[str] = None

    def __init__(self):
        self._input: Optional[str] = None

    @property
    def key(self) -> ArtifactKey:
        return ArtifactKey(self.group, self.number)

    @property
    def input(self) -> str:
        if self._input is None:
            raise InputNotReady(f"Input for day {self.number} has not been fetched!")
        return self._input

    @abstractmethod
    def part1(self) -> Any:
        """Answer to part 1. Converted with str()."""
        pass

    @abstractmethod
    def part2(self) -> Any:
        """Answer to part 2. Converted with str()."""
        pass

    def example_input(self) -> Optional[str]:
        return None

    def example_part1(self) -> Optional[str]:
        return None

    def example_part2(self) -> Optional[str]:
        return None

    def trial(self) -> Optional[TrialResult]:
        """
        Run both parts against the embedded example.

        Returns None when the unit has no example input.
        """
        log = scoped(logger, f"[Day {self.number}]")
        log.debug("Running in test mode")
        example = self.example_input()
        if example is None:
            log.debug("Test input not available")
            return None

        log.debug("Test input available, begin execution")
        self._input = example
        part1, part1_time = _timed(self.part1)
        part2, part2_time = _timed(self.part2)

        return TrialResult(
            part1=part1,
            part1_time=part1_time,
            part2=part2,
            part2_time=part2_time,
            part1_correct=_check(part1, self.example_part1()),
            part2_correct=_check(part2, self.example_part2()),
        )

    def execute(self, fetcher: ArtifactFetcher) -> UnitResult:
        """
        Fetch the real input and run both parts against it.

        Raises:
            InputError: the input could not be obtained
        """
        self._input = fetcher.fetch_text(self.key)

        log = scoped(logger, f"[Day {self.number}]")
        log.debug("Begin execution")
        part1, part1_time = _timed(self.part1)
        part2, part2_time = _timed(self.part2)
        return UnitResult(part1, part1_time, part2, part2_time)
