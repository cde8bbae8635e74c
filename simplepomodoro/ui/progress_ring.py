"""Circular progress ring rendered with QPainter.

- Dark track circle behind the arc.
- Arc starts at 12 o'clock and fills clockwise as the mode progresses.
- Round stroke caps, colour follows the current mode.
- ``MM:SS`` readout painted in the centre.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF, QVariantAnimation, QEasingCurve
from PyQt6.QtGui import QPainter, QPen, QColor, QFont
from PyQt6.QtWidgets import QWidget

from .styles import PALETTE


# Qt measures arcs in 1/16 degree, counter-clockwise from 3 o'clock.
ARC_START = 90 * 16


def arc_span(progress: float) -> int:
    """Qt span angle for *progress* (0..1); negative means clockwise."""
    progress = max(0.0, min(1.0, progress))
    return -int(round(progress * 360 * 16))


def ring_geometry(width: float, height: float,
                  inset: float = 10.0) -> tuple[float, float, float]:
    """Centre x, centre y and radius of the ring inside a widget."""
    side = min(width, height)
    return width / 2, height / 2, max(0.0, side / 2 - inset)


class ProgressRing(QWidget):
    """Custom-painted circular countdown."""

    STROKE_WIDTH = 15
    INSET = 10
    TIME_PIXEL_SIZE = 80

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(200, 200)

        self._progress: float = 0.0
        self._display_progress: float = 0.0
        self._time_text: str = "25:00"
        self._color = QColor("#30D158")
        self._track_color = QColor(PALETTE["track"])
        self._text_color = QColor(PALETTE["text"])

        # ── arc easing between ticks ───────────────────────────────────
        self._arc_anim = QVariantAnimation(self)
        self._arc_anim.setDuration(300)
        self._arc_anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._arc_anim.valueChanged.connect(self._on_arc_anim)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def time_text(self) -> str:
        return self._time_text

    @property
    def color(self) -> QColor:
        return QColor(self._color)

    def set_progress(self, progress: float) -> None:
        """Update the arc fill (0..1)."""
        progress = max(0.0, min(1.0, progress))
        if progress == self._progress:
            return
        self._progress = progress
        self._arc_anim.stop()
        # A refill (mode switch or reset) jumps instead of unwinding.
        if progress < self._display_progress:
            self._display_progress = progress
            self.update()
            return
        self._arc_anim.setStartValue(self._display_progress)
        self._arc_anim.setEndValue(progress)
        self._arc_anim.start()

    def set_time_text(self, text: str) -> None:
        self._time_text = text
        self.update()

    def set_color(self, color: str) -> None:
        self._color = QColor(color)
        self.update()

    def _on_arc_anim(self, value: object) -> None:
        self._display_progress = float(value)  # type: ignore[arg-type]
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        cx, cy, radius = ring_geometry(self.width(), self.height(), self.INSET)
        ring_rect = QRectF(cx - radius, cy - radius, radius * 2, radius * 2)

        # ── track ────────────────────────────────────────────────────
        track_pen = QPen(self._track_color, self.STROKE_WIDTH)
        painter.setPen(track_pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(ring_rect)

        # ── progress arc ─────────────────────────────────────────────
        span = arc_span(self._display_progress)
        if span != 0:
            arc_pen = QPen(self._color, self.STROKE_WIDTH)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc_pen)
            painter.drawArc(ring_rect, ARC_START, span)

        # ── readout ──────────────────────────────────────────────────
        font = QFont(".SF Pro Display")
        # Shrink with the ring so the digits never touch the stroke.
        font.setPixelSize(max(12, min(self.TIME_PIXEL_SIZE, int(radius * 0.55))))
        font.setWeight(QFont.Weight.ExtraLight)
        font.setStyleHint(QFont.StyleHint.SansSerif)
        painter.setFont(font)
        painter.setPen(self._text_color)
        painter.drawText(ring_rect, Qt.AlignmentFlag.AlignCenter, self._time_text)

        painter.end()
