"""Pydantic schemas for machine-readable reports."""

from datetime import datetime, timedelta
from typing import List, Optional

from pydantic import BaseModel

from .runner import STATUS_UNAVAILABLE, UnitOutcome


def _seconds(delta: timedelta) -> float:
    return round(delta.total_seconds(), 6)


class PartReport(BaseModel):
    answer: str
    seconds: float
    correct: Optional[bool] = None


class TrialReport(BaseModel):
    part1: PartReport
    part2: PartReport
    passed: bool


class ResultReport(BaseModel):
    part1: PartReport
    part2: PartReport


class UnitReport(BaseModel):
    number: int
    status: str  # "ok", "failed", "unregistered", "unavailable"
    trial: Optional[TrialReport] = None
    result: Optional[ResultReport] = None
    error: Optional[str] = None

    @classmethod
    def from_outcome(cls, outcome: UnitOutcome) -> "UnitReport":
        trial = None
        if outcome.trial is not None:
            t = outcome.trial
            trial = TrialReport(
                part1=PartReport(answer=t.part1, seconds=_seconds(t.part1_time), correct=t.part1_correct),
                part2=PartReport(answer=t.part2, seconds=_seconds(t.part2_time), correct=t.part2_correct),
                passed=t.passed,
            )
        result = None
        if outcome.result is not None:
            r = outcome.result
            result = ResultReport(
                part1=PartReport(answer=r.part1, seconds=_seconds(r.part1_time)),
                part2=PartReport(answer=r.part2, seconds=_seconds(r.part2_time)),
            )
        return cls(
            number=outcome.number,
            status=outcome.status,
            trial=trial,
            result=result,
            error=outcome.error,
        )


class RunReport(BaseModel):
    group: str
    units: List[UnitReport]
    stopped_early: bool = False

    @classmethod
    def from_outcomes(cls, group: str, outcomes: List[UnitOutcome]) -> "RunReport":
        return cls(
            group=group,
            units=[UnitReport.from_outcome(o) for o in outcomes],
            stopped_early=any(o.status == STATUS_UNAVAILABLE for o in outcomes),
        )


# History schemas
class UnitRunInfo(BaseModel):
    id: int
    group: str
    unit: int
    status: str
    part1: Optional[str] = None
    part1_ms: Optional[int] = None
    part2: Optional[str] = None
    part2_ms: Optional[int] = None
    trial_passed: Optional[bool] = None
    error: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
