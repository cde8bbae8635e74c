"""Small building blocks of the timer screen: status pill and round buttons."""

from __future__ import annotations

from PyQt6.QtCore import Qt, QSize, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QToolButton, QVBoxLayout, QWidget,
)

from ..timer.engine import Mode
from .icons import make_icon
from .styles import MODE_COLORS, MODE_LABELS, PILL_ALPHA, BUTTON_ALPHA, rgba


MODE_ICONS: dict[Mode, str] = {
    Mode.FOCUS: "bolt",
    Mode.BREAK: "moon",
}


class StatusPill(QFrame):
    """Rounded ``⚡ FOCUS`` / ``☾ BREAK`` badge in the mode colour."""

    ICON_SIZE = 14

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("statusPill")

        row = QHBoxLayout(self)
        row.setContentsMargins(16, 6, 16, 6)
        row.setSpacing(6)

        self._icon = QLabel(self)
        self._icon.setFixedSize(self.ICON_SIZE, self.ICON_SIZE)
        self._label = QLabel(self)
        font = QFont()
        font.setPixelSize(14)
        font.setWeight(QFont.Weight.DemiBold)
        font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 1)
        self._label.setFont(font)

        row.addWidget(self._icon)
        row.addWidget(self._label)

        self._mode: Mode | None = None
        self.set_mode(Mode.FOCUS)

    @property
    def text(self) -> str:
        return self._label.text()

    @property
    def mode(self) -> Mode | None:
        return self._mode

    def set_mode(self, mode: Mode) -> None:
        if mode == self._mode:
            return
        self._mode = mode
        color = MODE_COLORS[mode]
        self._label.setText(MODE_LABELS[mode])
        self._label.setStyleSheet(f"color: {color};")
        self._icon.setPixmap(
            make_icon(MODE_ICONS[mode], color, self.ICON_SIZE).pixmap(
                self.ICON_SIZE, self.ICON_SIZE,
            )
        )
        self.setStyleSheet(
            f"QFrame#statusPill {{ background-color: {rgba(color, PILL_ALPHA)};"
            f" border-radius: 14px; }}"
        )


class ControlButton(QWidget):
    """64 px tinted circle with an icon, caption underneath."""

    clicked = pyqtSignal()

    DIAMETER = 64
    ICON_SIZE = 32

    def __init__(
        self,
        label: str,
        icon: str,
        color: str,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)

        col = QVBoxLayout(self)
        col.setContentsMargins(0, 0, 0, 0)
        col.setSpacing(8)
        col.setAlignment(Qt.AlignmentFlag.AlignHCenter)

        self._button = QToolButton(self)
        self._button.setFixedSize(self.DIAMETER, self.DIAMETER)
        self._button.setIconSize(QSize(self.ICON_SIZE, self.ICON_SIZE))
        self._button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._button.clicked.connect(lambda: self.clicked.emit())

        self._caption = QLabel(self)
        self._caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        font = QFont()
        font.setPixelSize(14)
        font.setWeight(QFont.Weight.Medium)
        self._caption.setFont(font)

        col.addWidget(self._button, alignment=Qt.AlignmentFlag.AlignHCenter)
        col.addWidget(self._caption)

        self._label = ""
        self._icon_name = ""
        self._color = ""
        self.configure(label, icon, color)

    @property
    def label(self) -> str:
        return self._label

    @property
    def icon_name(self) -> str:
        return self._icon_name

    @property
    def color(self) -> str:
        return self._color

    def click(self) -> None:
        self._button.click()

    def configure(self, label: str, icon: str, color: str) -> None:
        """Swap caption, glyph and tint (Start ↔ Stop)."""
        if (label, icon, color) == (self._label, self._icon_name, self._color):
            return
        self._label, self._icon_name, self._color = label, icon, color
        self._caption.setText(label)
        self._caption.setStyleSheet(f"color: {color};")
        self._button.setIcon(make_icon(icon, color, self.ICON_SIZE))
        self._button.setToolTip(label)
        self._button.setStyleSheet(
            f"QToolButton {{ background-color: {rgba(color, BUTTON_ALPHA)};"
            f" border: none; border-radius: {self.DIAMETER // 2}px; }}"
        )
