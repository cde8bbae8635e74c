"""Tests for the Simple Pomodoro timer engine.

Covers: initial state, start/stop/reset semantics, single tick source,
expiry auto-chaining into the next mode, haptic pulse isolation, time
formatting and progress.
"""

import pytest
from PyQt6.QtCore import QTimer

from simplepomodoro.timer.engine import (
    TimerEngine, TimerState, TimerEvent, Mode,
    MODE_DURATIONS, FOCUS_DURATION, BREAK_DURATION, TRANSITIONS,
    format_time,
)

from helpers import SignalCollector, BrokenHaptics, run_ticks, finish_mode


# ═══════════════════════════════════════════════════════════════════════════
#  INITIAL STATE
# ═══════════════════════════════════════════════════════════════════════════


class TestInitialState:

    def test_starts_idle_in_focus(self, engine):
        assert engine.state == TimerState.IDLE
        assert engine.mode == Mode.FOCUS
        assert engine.remaining_seconds == 1500
        assert engine.is_running is False

    def test_durations(self):
        assert FOCUS_DURATION == 25 * 60
        assert BREAK_DURATION == 5 * 60
        assert MODE_DURATIONS[Mode.FOCUS] == FOCUS_DURATION
        assert MODE_DURATIONS[Mode.BREAK] == BREAK_DURATION

    def test_initial_formatted_time(self, engine):
        assert engine.formatted_time == "25:00"

    def test_exactly_one_tick_source(self, engine):
        assert len(engine.findChildren(QTimer)) == 1
        assert not engine._qt_timer.isActive()


# ═══════════════════════════════════════════════════════════════════════════
#  START
# ═══════════════════════════════════════════════════════════════════════════


class TestStart:

    def test_start_runs(self, engine):
        engine.start_timer()
        assert engine.is_running
        assert engine.state == TimerState.RUNNING
        assert engine._qt_timer.isActive()

    def test_start_notifies_immediately(self, engine):
        c = SignalCollector()
        engine.changed.connect(c)
        engine.start_timer()
        assert len(c) == 1

    def test_start_twice_is_start_once(self, engine):
        changed = SignalCollector()
        states = SignalCollector()
        engine.changed.connect(changed)
        engine.state_changed.connect(states)

        engine.start_timer()
        engine.start_timer()

        assert engine.state == TimerState.RUNNING
        assert len(changed) == 1
        assert len(states) == 1
        assert len(engine.findChildren(QTimer)) == 1

    def test_one_decrement_per_tick_after_double_start(self, engine):
        engine.start_timer()
        engine.start_timer()
        engine._on_tick()
        assert engine.remaining_seconds == FOCUS_DURATION - 1

    def test_start_with_no_time_left_is_noop(self, engine):
        engine._remaining = 0
        c = SignalCollector()
        engine.changed.connect(c)

        engine.start_timer()

        assert engine.state == TimerState.IDLE
        assert engine.remaining_seconds == 0
        assert engine.mode == Mode.FOCUS
        assert not engine._qt_timer.isActive()
        assert len(c) == 0

    def test_resume_after_stop_keeps_remaining(self, engine):
        engine.start_timer()
        run_ticks(engine, 10)
        engine.stop_timer()
        engine.start_timer()
        assert engine.remaining_seconds == FOCUS_DURATION - 10
        assert engine.is_running


# ═══════════════════════════════════════════════════════════════════════════
#  TICK
# ═══════════════════════════════════════════════════════════════════════════


class TestTick:

    def test_tick_decrements(self, engine):
        engine.start_timer()
        engine._on_tick()
        assert engine.remaining_seconds == FOCUS_DURATION - 1

    def test_tick_notifies(self, engine):
        ticks = SignalCollector()
        changed = SignalCollector()
        engine.start_timer()
        engine.tick.connect(ticks)
        engine.changed.connect(changed)

        engine._on_tick()

        assert ticks.last == FOCUS_DURATION - 1
        assert len(changed) == 1

    def test_tick_while_idle_does_nothing(self, engine):
        engine._on_tick()
        assert engine.remaining_seconds == FOCUS_DURATION
        assert engine.state == TimerState.IDLE

    def test_remaining_stays_in_bounds(self, engine):
        engine.start_timer()
        for _ in range(FOCUS_DURATION + BREAK_DURATION + 10):
            engine._on_tick()
            assert 0 <= engine.remaining_seconds <= engine.total_duration


# ═══════════════════════════════════════════════════════════════════════════
#  STOP / RESET
# ═══════════════════════════════════════════════════════════════════════════


class TestStopAndReset:

    def test_stop_goes_idle(self, engine):
        engine.start_timer()
        engine.stop_timer()
        assert engine.state == TimerState.IDLE
        assert not engine._qt_timer.isActive()

    def test_stop_is_idempotent(self, engine):
        engine.start_timer()
        run_ticks(engine, 3)
        engine.stop_timer()
        engine.stop_timer()
        assert engine.state == TimerState.IDLE
        assert engine.remaining_seconds == FOCUS_DURATION - 3

    def test_stop_notifies(self, engine):
        c = SignalCollector()
        engine.changed.connect(c)
        engine.stop_timer()
        assert len(c) == 1

    def test_reset_after_partial_countdown(self, engine):
        engine.start_timer()
        run_ticks(engine, 42)
        engine.reset_timer()
        assert engine.remaining_seconds == FOCUS_DURATION
        assert engine.is_running is False
        assert not engine._qt_timer.isActive()

    def test_reset_keeps_mode(self, engine):
        engine.start_timer()
        finish_mode(engine)
        assert engine.mode == Mode.BREAK
        run_ticks(engine, 30)

        engine.reset_timer()

        assert engine.mode == Mode.BREAK
        assert engine.remaining_seconds == BREAK_DURATION
        assert engine.state == TimerState.IDLE

    def test_reset_when_idle(self, engine):
        c = SignalCollector()
        engine.changed.connect(c)
        engine.reset_timer()
        assert engine.remaining_seconds == FOCUS_DURATION
        assert len(c) == 1

    def test_toggle(self, engine):
        engine.toggle()
        assert engine.is_running
        engine.toggle()
        assert not engine.is_running

    def test_shutdown_is_silent(self, engine):
        engine.start_timer()
        c = SignalCollector()
        engine.changed.connect(c)
        engine.shutdown()
        assert not engine._qt_timer.isActive()
        assert engine.is_running is False
        assert len(c) == 0


# ═══════════════════════════════════════════════════════════════════════════
#  EXPIRY / MODE SWITCH
# ═══════════════════════════════════════════════════════════════════════════


class TestExpiry:

    def test_focus_expiry_flips_to_break_and_keeps_running(self, engine):
        engine.start_timer()
        finish_mode(engine)
        assert engine.mode == Mode.BREAK
        assert engine.remaining_seconds == BREAK_DURATION
        assert engine.is_running
        assert engine._qt_timer.isActive()

    def test_break_expiry_flips_back_to_focus(self, engine):
        engine.start_timer()
        finish_mode(engine)
        finish_mode(engine)
        assert engine.mode == Mode.FOCUS
        assert engine.remaining_seconds == FOCUS_DURATION
        assert engine.is_running

    def test_mode_flips_exactly_once(self, engine):
        completed = SignalCollector()
        engine.mode_completed.connect(completed)
        engine.start_timer()
        finish_mode(engine)
        assert completed.items == [Mode.FOCUS]

    def test_no_external_start_needed(self, engine):
        engine.start_timer()
        finish_mode(engine)
        run_ticks(engine, 5)
        assert engine.remaining_seconds == BREAK_DURATION - 5

    def test_expiry_pulses_haptics_once(self, engine, haptics):
        engine.start_timer()
        finish_mode(engine)
        assert haptics.pulses == 1

    def test_expiry_without_haptics(self, bare_engine):
        bare_engine.start_timer()
        finish_mode(bare_engine)
        assert bare_engine.mode == Mode.BREAK

    def test_haptic_failure_is_ignored(self, qapp):
        broken = BrokenHaptics()
        engine = TimerEngine(haptics=broken)
        engine.start_timer()
        finish_mode(engine)
        assert broken.attempts == 1
        assert engine.mode == Mode.BREAK
        assert engine.remaining_seconds == BREAK_DURATION
        assert engine.is_running

    def test_expiry_is_a_running_to_running_transition(self, engine):
        states = SignalCollector()
        engine.start_timer()
        engine.state_changed.connect(states)
        finish_mode(engine)
        assert states.items == [TimerState.RUNNING]

    def test_end_to_end_full_focus(self, engine):
        assert (engine.mode, engine.remaining_seconds, engine.is_running) == (
            Mode.FOCUS, 1500, False,
        )
        engine.start_timer()
        run_ticks(engine, 1500)
        assert engine.mode == Mode.BREAK
        assert engine.remaining_seconds == 300
        assert engine.is_running is True

    def test_full_cycle_returns_to_focus(self, engine):
        engine.start_timer()
        run_ticks(engine, FOCUS_DURATION + BREAK_DURATION)
        assert engine.mode == Mode.FOCUS
        assert engine.remaining_seconds == FOCUS_DURATION
        assert engine.is_running


# ═══════════════════════════════════════════════════════════════════════════
#  TRANSITION TABLE
# ═══════════════════════════════════════════════════════════════════════════


class TestTransitionTable:

    def test_table_contents(self):
        assert TRANSITIONS[(TimerState.IDLE, TimerEvent.START)] == TimerState.RUNNING
        assert TRANSITIONS[(TimerState.RUNNING, TimerEvent.EXPIRE)] == TimerState.RUNNING
        assert (TimerState.RUNNING, TimerEvent.START) not in TRANSITIONS
        assert (TimerState.IDLE, TimerEvent.EXPIRE) not in TRANSITIONS

    def test_unlisted_event_is_noop(self, engine):
        assert engine._fire(TimerEvent.EXPIRE) is False
        assert engine.state == TimerState.IDLE


# ═══════════════════════════════════════════════════════════════════════════
#  FORMATTING / PROGRESS
# ═══════════════════════════════════════════════════════════════════════════


class TestFormatting:

    @pytest.mark.parametrize("seconds, expected", [
        (1500, "25:00"),
        (65, "01:05"),
        (0, "00:00"),
        (300, "05:00"),
        (3599, "59:59"),
    ])
    def test_examples(self, seconds, expected):
        assert format_time(seconds) == expected

    def test_whole_hour_range(self):
        for n in range(3600):
            assert format_time(n) == f"{n // 60:02d}:{n % 60:02d}"

    def test_formatted_time_follows_countdown(self, engine):
        engine.start_timer()
        run_ticks(engine, 1435)
        assert engine.formatted_time == "01:05"


class TestProgress:

    def test_zero_at_start(self, engine):
        assert engine.progress == pytest.approx(0.0)

    def test_halfway(self, engine):
        engine.start_timer()
        run_ticks(engine, FOCUS_DURATION // 2)
        assert engine.progress == pytest.approx(0.5)

    def test_resets_on_mode_switch(self, engine):
        engine.start_timer()
        finish_mode(engine)
        assert engine.progress == pytest.approx(0.0)
        assert engine.total_duration == BREAK_DURATION
