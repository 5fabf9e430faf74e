"""Tests for the timing harness and logging setup."""

import logging
import time

import pytest

from measure.core.measurement import Measurement
from measure.utils.logging import setup_console_logger
from measure.utils.timer import measure, timed, timer


class WorkFailed(Exception):
    pass


def _fail():
    raise WorkFailed("boom")


class TestMeasure:
    def test_returns_result_and_measurement(self):
        result, m = measure(lambda: sum(range(10000)))
        assert result == sum(range(10000))
        assert isinstance(m, Measurement)
        assert m.elapsed_ns >= 0

    def test_none_result(self):
        result, m = measure(lambda: None)
        assert result is None
        assert isinstance(m, Measurement)

    def test_runs_exactly_once(self):
        calls = []
        measure(lambda: calls.append(1))
        assert calls == [1]

    def test_exception_propagates_unchanged(self):
        with pytest.raises(WorkFailed, match="boom") as exc_info:
            measure(_fail)
        assert type(exc_info.value) is WorkFailed

    def test_sleep_lower_bound_and_unit(self):
        _, m = measure(lambda: time.sleep(0.02))
        assert m >= Measurement(20_000_000)
        assert str(m).endswith("ms")


class TestTimerContext:
    def test_measures_time(self):
        with timer() as t:
            _ = sum(range(10000))
        assert t.elapsed > Measurement.zero()
        assert t.elapsed.total_seconds() < 5.0  # sanity

    def test_exception_leaves_no_measurement(self):
        with pytest.raises(WorkFailed):
            with timer() as t:
                _fail()
        assert t.measurement is None
        with pytest.raises(RuntimeError, match="not completed"):
            t.elapsed


class TestTimedDecorator:
    def test_logs_and_returns_result(self, caplog):
        @timed
        def double(x):
            return 2 * x

        caplog.set_level(logging.DEBUG, logger="measure.utils.timer")
        assert double(21) == 42
        assert any("double took" in rec.getMessage() for rec in caplog.records)

    def test_custom_logger_and_level(self, caplog):
        log = logging.getLogger("measure.tests.timed")

        @timed(log=log, level=logging.INFO)
        def work():
            return "done"

        caplog.set_level(logging.INFO, logger="measure.tests.timed")
        assert work() == "done"
        [record] = [r for r in caplog.records if r.name == "measure.tests.timed"]
        assert record.levelno == logging.INFO

    def test_exception_not_logged(self, caplog):
        failing = timed(_fail)
        caplog.set_level(logging.DEBUG, logger="measure.utils.timer")
        with pytest.raises(WorkFailed):
            failing()
        assert not any("took" in rec.getMessage() for rec in caplog.records)

    def test_preserves_metadata(self):
        @timed
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."


class TestConsoleLogger:
    @pytest.fixture
    def restore_logger(self):
        logger = logging.getLogger("measure")
        yield logger
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    def test_setup(self, restore_logger):
        logger = setup_console_logger(logging.DEBUG)
        assert logger is restore_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert not logger.propagate

    def test_idempotent(self, restore_logger):
        setup_console_logger()
        setup_console_logger()
        assert len(restore_logger.handlers) == 1
