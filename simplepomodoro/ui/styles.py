"""QSS stylesheet and colours for Simple Pomodoro."""

from __future__ import annotations

from ..timer.engine import Mode

# ── mode colours (pill, ring arc) ────────────────────────────────────────

MODE_COLORS: dict[Mode, str] = {
    Mode.FOCUS: "#30D158",   # active green
    Mode.BREAK: "#5E5CE6",   # indigo
}

MODE_LABELS: dict[Mode, str] = {
    Mode.FOCUS: "FOCUS",
    Mode.BREAK: "BREAK",
}

# ── control colours ──────────────────────────────────────────────────────

START_COLOR = "#4CD964"
STOP_COLOR = "#FF3B30"
RESET_COLOR = "#8E8E93"

PALETTE: dict[str, str] = {
    "bg":    "#000000",
    "track": "#1C1C1E",
    "text":  "#FFFFFF",
}

PILL_ALPHA = 0.15
BUTTON_ALPHA = 0.2


def rgba(hex_color: str, alpha: float) -> str:
    """``#RRGGBB`` → ``rgba(r, g, b, a)`` for use inside QSS."""
    h = hex_color.lstrip("#")
    r, g, b = (int(h[i:i + 2], 16) for i in (0, 2, 4))
    return f"rgba({r}, {g}, {b}, {int(round(alpha * 255))})"


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    return f"""
QMainWindow, QWidget#root {{
    background-color: {p["bg"]};
}}
QLabel {{
    color: {p["text"]};
    background: transparent;
}}
QToolButton {{
    border: none;
    background: transparent;
}}
"""
