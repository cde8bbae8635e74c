"""Timer package."""

from .engine import (
    TimerEngine,
    TimerState,
    TimerEvent,
    Mode,
    MODE_DURATIONS,
    FOCUS_DURATION,
    BREAK_DURATION,
    format_time,
)

__all__ = [
    "TimerEngine",
    "TimerState",
    "TimerEvent",
    "Mode",
    "MODE_DURATIONS",
    "FOCUS_DURATION",
    "BREAK_DURATION",
    "format_time",
]
