"""Completion feedback package."""

from .haptics import HapticFeedback, generate_heavy_pulse

__all__ = [
    "HapticFeedback",
    "generate_heavy_pulse",
]
