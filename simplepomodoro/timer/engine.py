"""Timer state machine for Simple Pomodoro.

States
------
IDLE          Not counting down, waiting for the user to start.
RUNNING       Counting down the current mode (Focus or Break).

Transitions
-----------
IDLE → RUNNING       (start, only while time is left)
RUNNING → IDLE       (stop / reset)
IDLE → IDLE          (stop / reset, idempotent)
RUNNING → RUNNING    (countdown reaches 0: mode flips, clock refills)

The mode is orthogonal to the state: reset never changes it, only
expiry does.  Expiry chains straight into the next mode without a pause.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"


class Mode(Enum):
    FOCUS = "focus"
    BREAK = "break"


class TimerEvent(Enum):
    START = "start"
    STOP = "stop"
    RESET = "reset"
    EXPIRE = "expire"


# ── constants ─────────────────────────────────────────────────────────────

FOCUS_DURATION = 25 * 60
BREAK_DURATION = 5 * 60
TICK_INTERVAL_MS = 1000

MODE_DURATIONS: dict[Mode, int] = {
    Mode.FOCUS: FOCUS_DURATION,
    Mode.BREAK: BREAK_DURATION,
}

NEXT_MODE: dict[Mode, Mode] = {
    Mode.FOCUS: Mode.BREAK,
    Mode.BREAK: Mode.FOCUS,
}

# Pairs missing from this table are no-ops.
TRANSITIONS: dict[tuple[TimerState, TimerEvent], TimerState] = {
    (TimerState.IDLE, TimerEvent.START): TimerState.RUNNING,
    (TimerState.RUNNING, TimerEvent.STOP): TimerState.IDLE,
    (TimerState.IDLE, TimerEvent.STOP): TimerState.IDLE,
    (TimerState.RUNNING, TimerEvent.RESET): TimerState.IDLE,
    (TimerState.IDLE, TimerEvent.RESET): TimerState.IDLE,
    (TimerState.RUNNING, TimerEvent.EXPIRE): TimerState.RUNNING,
}


def format_time(seconds: int) -> str:
    """Render *seconds* as zero-padded ``MM:SS``."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


class Haptics(Protocol):
    def pulse(self) -> None: ...


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based Focus/Break countdown.

    Signals
    -------
    changed()
        Emitted after every mutation.  Re-read the properties.
    tick(remaining_seconds: int)
        Emitted after each one-second decrement.
    state_changed(new_state: TimerState)
        Emitted on every fired transition.
    mode_completed(mode: Mode)
        Emitted when a mode's countdown runs out, before the next starts.
    """

    changed = pyqtSignal()
    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    mode_completed = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        haptics: Haptics | None = None,
    ) -> None:
        super().__init__(parent)

        self._haptics = haptics

        self._state: TimerState = TimerState.IDLE
        self._mode: Mode = Mode.FOCUS
        self._remaining: int = MODE_DURATIONS[Mode.FOCUS]

        # The single tick source.  Active exactly while RUNNING.
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def remaining_seconds(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._state == TimerState.RUNNING

    @property
    def formatted_time(self) -> str:
        return format_time(self._remaining)

    @property
    def total_duration(self) -> int:
        """Full length of the current mode in seconds."""
        return MODE_DURATIONS[self._mode]

    @property
    def progress(self) -> float:
        """0.0 → 1.0 through the current mode."""
        total = self.total_duration
        if total <= 0:
            return 0.0
        return max(0.0, min(1.0, 1.0 - self._remaining / total))

    @property
    def haptics(self) -> Haptics | None:
        return self._haptics

    @haptics.setter
    def haptics(self, value: Haptics | None) -> None:
        self._haptics = value

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start_timer(self) -> None:
        """Start counting down.  No-op while running or with no time left."""
        if self._remaining <= 0:
            return
        if not self._fire(TimerEvent.START):
            return
        self._qt_timer.start()
        self.changed.emit()

    def stop_timer(self) -> None:
        """Freeze the countdown.  Safe to call when already idle."""
        self._qt_timer.stop()
        self._fire(TimerEvent.STOP)
        self.changed.emit()

    def reset_timer(self) -> None:
        """Stop and refill the clock for the current mode."""
        self._qt_timer.stop()
        self._fire(TimerEvent.RESET)
        self._remaining = MODE_DURATIONS[self._mode]
        self.changed.emit()

    def toggle(self) -> None:
        """Start/Stop button behaviour."""
        if self.is_running:
            self.stop_timer()
        else:
            self.start_timer()

    def shutdown(self) -> None:
        """Cancel the tick at application teardown.  Emits nothing."""
        self._qt_timer.stop()
        self._state = TimerState.IDLE

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _fire(self, event: TimerEvent) -> bool:
        """Apply *event* through the transition table.

        Returns False (and changes nothing) when the pair is not listed.
        """
        target = TRANSITIONS.get((self._state, event))
        if target is None:
            return False
        logger.debug("%s + %s -> %s", self._state.value, event.value, target.value)
        self._state = target
        self.state_changed.emit(target)
        return True

    def _on_tick(self) -> None:
        if self._state != TimerState.RUNNING:
            return
        if self._remaining > 0:
            self._remaining -= 1
            self.tick.emit(self._remaining)
            self.changed.emit()
        if self._remaining <= 0:
            self._expire()

    def _expire(self) -> None:
        self._qt_timer.stop()
        finished = self._mode
        logger.info("%s complete", finished.value)
        self._pulse()

        self._mode = NEXT_MODE[finished]
        self._remaining = MODE_DURATIONS[self._mode]
        self.mode_completed.emit(finished)
        self._fire(TimerEvent.EXPIRE)
        self._qt_timer.start()
        self.changed.emit()

    def _pulse(self) -> None:
        if self._haptics is None:
            return
        try:
            self._haptics.pulse()
        except Exception:
            logger.debug("haptic pulse failed", exc_info=True)
