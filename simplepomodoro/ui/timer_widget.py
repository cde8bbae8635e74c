"""The one and only screen.

Layout (top → bottom):
    - StatusPill (FOCUS / BREAK)
    - ProgressRing with the MM:SS readout (large, centred)
    - Reset (left) and Start/Stop (right)
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout

from ..timer.engine import TimerEngine
from .controls import ControlButton, StatusPill
from .progress_ring import ProgressRing
from .styles import MODE_COLORS, START_COLOR, STOP_COLOR, RESET_COLOR


class TimerWidget(QWidget):
    """Renders a ``TimerEngine`` and forwards button presses to it."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("root")
        self._engine = engine
        self._build_ui()
        self._connect_signals()
        self.refresh()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(30, 20, 30, 60)
        root.setSpacing(0)

        pill_row = QHBoxLayout()
        pill_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._pill = StatusPill(self)
        pill_row.addWidget(self._pill)
        root.addLayout(pill_row)

        self._ring = ProgressRing(self)
        root.addWidget(self._ring, stretch=1)

        btn_row = QHBoxLayout()
        btn_row.setContentsMargins(0, 0, 0, 0)
        self._reset_btn = ControlButton("Reset", "reset", RESET_COLOR, self)
        self._start_stop_btn = ControlButton("Start", "play", START_COLOR, self)
        btn_row.addWidget(self._reset_btn)
        btn_row.addStretch(1)
        btn_row.addWidget(self._start_stop_btn)
        root.addLayout(btn_row)

    def _connect_signals(self) -> None:
        self._reset_btn.clicked.connect(self._engine.reset_timer)
        self._start_stop_btn.clicked.connect(self._engine.toggle)
        self._engine.changed.connect(self.refresh)

    # ── accessors (used by the window and tests) ─────────────────────────

    @property
    def ring(self) -> ProgressRing:
        return self._ring

    @property
    def pill(self) -> StatusPill:
        return self._pill

    @property
    def start_stop_button(self) -> ControlButton:
        return self._start_stop_btn

    @property
    def reset_button(self) -> ControlButton:
        return self._reset_btn

    # ── slots ─────────────────────────────────────────────────────────────

    def refresh(self) -> None:
        """Re-render everything from the engine's current state."""
        engine = self._engine
        color = MODE_COLORS[engine.mode]

        self._pill.set_mode(engine.mode)
        self._ring.set_color(color)
        self._ring.set_time_text(engine.formatted_time)
        self._ring.set_progress(engine.progress)

        if engine.is_running:
            self._start_stop_btn.configure("Stop", "pause", STOP_COLOR)
        else:
            self._start_stop_btn.configure("Start", "play", START_COLOR)
