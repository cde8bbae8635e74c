"""Icons drawn with QPainter. No image assets ship with the app.

Glyphs
------
- ``bolt``   — Focus status
- ``moon``   — Break status
- ``play``   — Start
- ``pause``  — Stop
- ``reset``  — counter-clockwise arrow
"""

from __future__ import annotations

import math

from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import QColor, QIcon, QImage, QPainter, QPainterPath, QPen, QPixmap


ICON_NAMES = ("bolt", "moon", "play", "pause", "reset")


def _bolt(p: QPainter, s: float) -> None:
    path = QPainterPath()
    path.moveTo(s * 0.58, s * 0.05)
    path.lineTo(s * 0.20, s * 0.56)
    path.lineTo(s * 0.47, s * 0.56)
    path.lineTo(s * 0.40, s * 0.95)
    path.lineTo(s * 0.80, s * 0.42)
    path.lineTo(s * 0.53, s * 0.42)
    path.closeSubpath()
    p.drawPath(path)


def _moon(p: QPainter, s: float) -> None:
    full = QPainterPath()
    full.addEllipse(QRectF(s * 0.10, s * 0.10, s * 0.80, s * 0.80))
    bite = QPainterPath()
    bite.addEllipse(QRectF(s * 0.32, s * 0.02, s * 0.70, s * 0.70))
    p.drawPath(full.subtracted(bite))


def _play(p: QPainter, s: float) -> None:
    path = QPainterPath()
    path.moveTo(s * 0.28, s * 0.15)
    path.lineTo(s * 0.85, s * 0.50)
    path.lineTo(s * 0.28, s * 0.85)
    path.closeSubpath()
    p.drawPath(path)


def _pause(p: QPainter, s: float) -> None:
    bar_w, bar_h = s * 0.20, s * 0.68
    y = (s - bar_h) / 2
    r = s * 0.05
    p.drawRoundedRect(QRectF(s * 0.24, y, bar_w, bar_h), r, r)
    p.drawRoundedRect(QRectF(s * 0.56, y, bar_w, bar_h), r, r)


def _reset(p: QPainter, s: float) -> None:
    colour = p.brush().color()
    cx = cy = s / 2
    radius = s * 0.32
    pen = QPen(colour, s * 0.09)
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    p.setPen(pen)
    p.setBrush(Qt.BrushStyle.NoBrush)
    rect = QRectF(cx - radius, cy - radius, radius * 2, radius * 2)
    # Open at the top-left where the arrowhead sits.
    p.drawArc(rect, 120 * 16, -300 * 16)

    # Arrowhead at the arc's start, pointing counter-clockwise.
    a = math.radians(120)
    tip = QPointF(cx + radius * math.cos(a), cy - radius * math.sin(a))
    head = s * 0.16
    p.setPen(Qt.PenStyle.NoPen)
    p.setBrush(colour)
    path = QPainterPath()
    path.moveTo(tip.x() - head, tip.y() - head * 0.15)
    path.lineTo(tip.x() + head * 0.35, tip.y() - head * 0.9)
    path.lineTo(tip.x() + head * 0.35, tip.y() + head * 0.6)
    path.closeSubpath()
    p.drawPath(path)


_PAINTERS = {
    "bolt": _bolt,
    "moon": _moon,
    "play": _play,
    "pause": _pause,
    "reset": _reset,
}


def make_icon(name: str, color: str, size: int = 32) -> QIcon:
    """Render glyph *name* in *color* at *size* logical pixels (2× backing)."""
    painter_fn = _PAINTERS[name]
    px = size * 2  # draw at 2× for Retina
    img = QImage(px, px, QImage.Format.Format_ARGB32_Premultiplied)
    img.fill(Qt.GlobalColor.transparent)

    p = QPainter(img)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    p.setPen(Qt.PenStyle.NoPen)
    p.setBrush(QColor(color))
    painter_fn(p, float(px))
    p.end()

    img.setDevicePixelRatio(2.0)
    return QIcon(QPixmap.fromImage(img))
