"""
Runs a range of days one at a time.

Each day is handled inside its own error boundary: a missing unit, a failed
download or a crash in a part is reported and the next day runs. The one
exception is ArtifactNotAvailable. Days are released in order, so once one
isn't out yet none of the later ones are either and the range stops there.
"""

import logging
import traceback
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, List, Optional

import click

from .config import FIRST_UNIT, LAST_UNIT
from .db import RunHistory
from .fetch import ArtifactFetcher, ArtifactNotAvailable, InputError
from .log import scoped
from .units import TrialResult, UnitNotRegistered, UnitRegistry, UnitResult

logger = logging.getLogger(__name__)

RULE = "-" * 26

STATUS_OK = "ok"
STATUS_FAILED = "failed"
STATUS_UNREGISTERED = "unregistered"
STATUS_UNAVAILABLE = "unavailable"


class InvalidRange(ValueError):
    """The requested range of days is unusable."""
    pass


@dataclass
class UnitOutcome:
    """What happened to one day of a run."""
    number: int
    status: str
    trial: Optional[TrialResult] = None
    result: Optional[UnitResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


def validate_range(first: int, last: int) -> None:
    if first > last:
        raise InvalidRange(f"First day ({first}) must be less than or equal to last day ({last})")
    for bound in (first, last):
        if not FIRST_UNIT <= bound <= LAST_UNIT:
            raise InvalidRange(f"Day {bound} is outside {FIRST_UNIT}-{LAST_UNIT}")


def format_duration(delta: timedelta) -> str:
    seconds = delta.total_seconds()
    if seconds < 1:
        return f"{seconds * 1000:.3f} ms"
    return f"{seconds:.3f} s"


def format_friendly(exc: BaseException) -> str:
    """Short message followed by the full traceback."""
    message = getattr(exc, "message", None) or str(exc)
    details = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return f"{message}\n\nDebug details:\n{details}"


def _verdict(correct: Optional[bool]) -> str:
    if correct is None:
        return "??"
    return "PASS" if correct else "FAIL"


class RangeRunner:
    """
    Runs days sequentially against one fetcher.

    Usage:
        with ArtifactFetcher(env) as fetcher:
            runner = RangeRunner(build_registry("2015"), fetcher)
            outcomes = runner.run(1, 25)
    """

    def __init__(
        self,
        registry: UnitRegistry,
        fetcher: Optional[ArtifactFetcher] = None,
        trial: bool = True,
        echo: Callable[[str], None] = click.echo,
        history: Optional[RunHistory] = None,
        group: Optional[str] = None,
    ):
        self.registry = registry
        self.fetcher = fetcher
        self.trial = trial
        self.echo = echo
        self.history = history
        self.group = group

    def run(self, first: int, last: int) -> List[UnitOutcome]:
        """
        Run every day in ``[first, last]``.

        Raises:
            InvalidRange: before any day runs
        """
        log = scoped(logger, "[Runner]")
        log.debug("Beginning run")
        validate_range(first, last)
        if self.fetcher is None:
            raise ValueError("A fetcher is required for real runs; use trial_range() instead")

        outcomes: List[UnitOutcome] = []
        for number in range(first, last + 1):
            try:
                outcome = self.run_unit(number)
            except ArtifactNotAvailable as e:
                outcome = e.outcome
                self._record(outcome)
                outcomes.append(outcome)
                log.info("Stopping at day %d, later days won't be available either", number)
                break
            self._record(outcome)
            outcomes.append(outcome)
        return outcomes

    def run_unit(self, number: int) -> UnitOutcome:
        """
        Trial and execute one day.

        Raises:
            ArtifactNotAvailable: the day isn't released yet. Its ``outcome``
                attribute holds the day's UnitOutcome, including any trial.
        """
        log = scoped(logger, f"[Day {number}]")
        log.debug("Attempting day %d", number)
        self.echo(RULE)
        trial = None
        try:
            if self.trial:
                trial = self.registry.create(number).trial()
                if trial is not None:
                    self._report_trial(number, trial)
            unit = self.registry.create(number)
            result = unit.execute(self.fetcher)
        except UnitNotRegistered as e:
            log.error("Day class not provided")
            self.echo(str(e))
            return UnitOutcome(number, STATUS_UNREGISTERED, error=str(e))
        except ArtifactNotAvailable as e:
            log.warning("Day not available yet")
            self.echo(format_friendly(e))
            e.outcome = UnitOutcome(number, STATUS_UNAVAILABLE, trial=trial, error=e.message)
            raise
        except InputError as e:
            log.error("Input exception hit", exc_info=True)
            self.echo(f"Couldn't fetch input for day {number}")
            self.echo(format_friendly(e))
            return UnitOutcome(number, STATUS_FAILED, trial=trial, error=e.message)
        except Exception as e:
            log.error("Exception hit during day code", exc_info=True)
            self.echo(format_friendly(e))
            return UnitOutcome(number, STATUS_FAILED, trial=trial, error=str(e))

        self._report_result(number, result)
        return UnitOutcome(number, STATUS_OK, trial=trial, result=result)

    def trial_range(self, first: int, last: int) -> List[UnitOutcome]:
        """Self-test every day in ``[first, last]`` without touching the network."""
        validate_range(first, last)
        outcomes = []
        for number in range(first, last + 1):
            log = scoped(logger, f"[Day {number}]")
            self.echo(RULE)
            try:
                trial = self.registry.create(number).trial()
            except UnitNotRegistered as e:
                self.echo(str(e))
                outcomes.append(UnitOutcome(number, STATUS_UNREGISTERED, error=str(e)))
                continue
            except Exception as e:
                log.error("Exception hit during day code", exc_info=True)
                self.echo(format_friendly(e))
                outcomes.append(UnitOutcome(number, STATUS_FAILED, error=str(e)))
                continue

            if trial is None:
                self.echo(f"Day {number}\nNo example available")
                outcomes.append(UnitOutcome(number, STATUS_OK))
            else:
                self._report_trial(number, trial)
                status = STATUS_OK if trial.passed else STATUS_FAILED
                outcomes.append(UnitOutcome(number, status, trial=trial))
        return outcomes

    def _record(self, outcome: UnitOutcome) -> None:
        if self.history is not None and self.group is not None:
            self.history.record(self.group, outcome)

    def _report_trial(self, number: int, trial: TrialResult) -> None:
        self.echo(
            f"Day {number} (example)\n"
            f"Part 1: {trial.part1} [{_verdict(trial.part1_correct)}] ({format_duration(trial.part1_time)})\n"
            f"Part 2: {trial.part2} [{_verdict(trial.part2_correct)}] ({format_duration(trial.part2_time)})"
        )

    def _report_result(self, number: int, result: UnitResult) -> None:
        self.echo(
            f"Day {number}\n"
            f"Part 1: {result.part1} ({format_duration(result.part1_time)})\n"
            f"Part 2: {result.part2} ({format_duration(result.part2_time)})"
        )
