"""Tests for lanedodge.core.timer — manual and fixed-step tick timers."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from lanedodge.core.timer import FixedStepTimer, ManualTimer


class TestManualTimer:
    def test_fire_runs_callback(self):
        calls = []
        timer = ManualTimer()
        timer.start(lambda: calls.append(1))
        assert timer.fire(3) == 3
        assert len(calls) == 3
        assert timer.fired == 3

    def test_no_ticks_before_start(self):
        assert ManualTimer().fire(5) == 0

    def test_stop_from_callback(self):
        timer = ManualTimer()
        calls = []

        def tick():
            calls.append(1)
            timer.stop()

        timer.start(tick)
        assert timer.fire(10) == 1
        assert len(calls) == 1


class TestFixedStepTimer:
    def make(self, **kwargs):
        calls = []
        timer = FixedStepTimer(1.0, clock=lambda: 0.0, **kwargs)
        timer.start(lambda: calls.append(1))
        return timer, calls

    def test_nothing_due_early(self):
        timer, calls = self.make()
        assert timer.pump(0.5) == 0
        assert calls == []

    def test_one_tick_per_period(self):
        timer, calls = self.make()
        assert timer.pump(1.0) == 1
        assert timer.pump(1.5) == 0
        assert timer.pump(2.0) == 1
        assert len(calls) == 2

    def test_backlog_serialized(self):
        timer, calls = self.make()
        assert timer.pump(3.5) == 3
        assert len(calls) == 3
        assert timer.time_until_next(3.5) == pytest.approx(0.5)

    def test_backlog_capped_and_dropped(self):
        timer, calls = self.make(max_catchup=2)
        assert timer.pump(10.0) == 2
        assert timer.dropped == 8
        assert timer.pump(10.5) == 0
        assert timer.pump(11.0) == 1

    def test_stop_inside_pump(self):
        calls = []
        timer = FixedStepTimer(1.0, clock=lambda: 0.0)

        def tick():
            calls.append(1)
            timer.stop()

        timer.start(tick)
        assert timer.pump(5.0) == 1
        assert timer.pump(6.0) == 0

    @pytest.mark.parametrize("period,catchup", [(0, 5), (-0.01, 5), (0.01, 0)])
    def test_invalid_arguments(self, period, catchup):
        with pytest.raises(ValueError):
            FixedStepTimer(period, max_catchup=catchup)
