"""Simple Pomodoro — a single-screen Focus/Break countdown."""

__version__ = "0.1.0"
