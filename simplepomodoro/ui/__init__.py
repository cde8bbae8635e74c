"""UI package."""

from .timer_widget import TimerWidget
from .progress_ring import ProgressRing
from .controls import ControlButton, StatusPill

__all__ = [
    "TimerWidget",
    "ProgressRing",
    "ControlButton",
    "StatusPill",
]
