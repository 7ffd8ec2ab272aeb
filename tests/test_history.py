"""Tests for the run history store."""

from datetime import timedelta

import pytest

from advent.db import RunHistory
from advent.runner import UnitOutcome
from advent.schemas import RunReport, UnitReport, UnitRunInfo
from advent.units import TrialResult, UnitResult


def ok_outcome(number, part1_ms=10, part2_ms=20, trial=None):
    result = UnitResult(
        part1="a",
        part1_time=timedelta(milliseconds=part1_ms),
        part2="b",
        part2_time=timedelta(milliseconds=part2_ms),
    )
    return UnitOutcome(number, "ok", trial=trial, result=result)


@pytest.fixture
def history(tmp_path):
    store = RunHistory(tmp_path / "db" / "history.db")
    yield store
    store.close()


class TestRunHistory:

    def test_record_success(self, history):
        row = history.record("2015", ok_outcome(1))
        assert row.id is not None
        assert (row.group, row.unit, row.status) == ("2015", 1, "ok")
        assert (row.part1_ms, row.part2_ms) == (10, 20)
        assert row.trial_passed is None

    def test_record_failure(self, history):
        history.record("2015", UnitOutcome(4, "unregistered", error="No unit"))
        row = history.recent()[0]
        assert row.part1 is None
        assert row.error == "No unit"

    def test_trial_verdict(self, history):
        trial = TrialResult("1", timedelta(0), "2", timedelta(0), part1_correct=False)
        row = history.record("2015", ok_outcome(1, trial=trial))
        assert row.trial_passed is False

    def test_recent_filters(self, history):
        history.record("2015", ok_outcome(1))
        history.record("2015", ok_outcome(2))
        history.record("2016", ok_outcome(1))

        assert len(history.recent()) == 3
        assert [r.group for r in history.recent(group="2016")] == ["2016"]
        assert [r.unit for r in history.recent(group="2015", unit=2)] == [2]
        assert len(history.recent(limit=1)) == 1

    def test_best(self, history):
        history.record("2015", ok_outcome(1, 50, 50))
        history.record("2015", ok_outcome(1, 5, 10))
        history.record("2015", UnitOutcome(1, "failed", error="boom"))

        best = history.best("2015", 1)
        assert (best.part1_ms, best.part2_ms) == (5, 10)
        assert history.best("2015", 2) is None


class TestSchemas:

    def test_history_row_info(self, history):
        row = history.record("2015", ok_outcome(3))
        info = UnitRunInfo.model_validate(row)
        assert info.unit == 3
        assert info.part2 == "b"

    def test_unit_report(self):
        trial = TrialResult("1", timedelta(seconds=1), "2", timedelta(0), part1_correct=True)
        report = UnitReport.from_outcome(ok_outcome(1, trial=trial))
        assert report.trial.part1.correct is True
        assert report.trial.part2.correct is None
        assert report.trial.passed
        assert report.result.part1.seconds == 0.01

    def test_run_report_stopped_early(self):
        report = RunReport.from_outcomes(
            "2015", [ok_outcome(1), UnitOutcome(2, "unavailable", error="later")]
        )
        assert report.stopped_early
        assert [u.status for u in report.units] == ["ok", "unavailable"]
