"""Shared test helpers for Simple Pomodoro."""

from simplepomodoro.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeHaptics:
    """Counts pulses instead of buzzing."""

    def __init__(self):
        self.pulses = 0

    def pulse(self):
        self.pulses += 1


class BrokenHaptics:
    """A pulse that always blows up."""

    def __init__(self):
        self.attempts = 0

    def pulse(self):
        self.attempts += 1
        raise RuntimeError("no vibration motor")


def run_ticks(engine: TimerEngine, count: int) -> None:
    """Simulate *count* one-second ticks without waiting on the clock."""
    for _ in range(count):
        engine._on_tick()


def finish_mode(engine: TimerEngine) -> None:
    """Fast-forward a running engine to the last tick of the current mode."""
    engine._remaining = 1
    engine._on_tick()
