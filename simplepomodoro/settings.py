"""Application preferences with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/SimplePomodoro/settings.json

Only window and feedback preferences live here.  Timer durations are
fixed and the countdown itself is never saved.

Usage::

    settings = load_settings()
    settings.haptics_enabled = False
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path


logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "SimplePomodoro"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── feedback ──────────────────────────────────────────────────────
    haptics_enabled: bool = True
    haptic_volume: int = 80                # 0-100

    # ── window ────────────────────────────────────────────────────────
    always_on_top: bool = False
    window_x: int | None = None
    window_y: int | None = None
    window_width: int = 390
    window_height: int = 760


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    try:
        if SETTINGS_PATH.exists():
            data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
            valid_keys = {f.name for f in fields(Settings)}
            filtered = {k: v for k, v in data.items() if k in valid_keys}
            return Settings(**filtered)
    except Exception:
        logger.warning("Ignoring unreadable settings at %s", SETTINGS_PATH, exc_info=True)
    return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
