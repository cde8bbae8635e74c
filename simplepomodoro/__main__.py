"""Allow running Simple Pomodoro as a module: python -m simplepomodoro."""

from __future__ import annotations

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import PomodoroWindow
from .feedback.haptics import HapticFeedback
from .settings import load_settings
from .timer.engine import TimerEngine


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("simplepomodoro")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="simple-pomodoro")
    parser.add_argument(
        "--debug", action="store_true", help="log state transitions",
    )
    # Qt consumes its own flags (-platform, -style, ...).
    args, _ = parser.parse_known_args(argv)
    return args


def main() -> None:
    args = parse_args(sys.argv[1:])
    logger = setup_logging(logging.DEBUG if args.debug else logging.INFO)

    app = QApplication(sys.argv)
    app.setApplicationName("Simple Pomodoro")
    app.setOrganizationName("SimplePomodoro")

    settings = load_settings()
    haptics = HapticFeedback(
        app,
        enabled=settings.haptics_enabled,
        volume=settings.haptic_volume,
    )
    engine = TimerEngine(app, haptics=haptics)
    logger.info("haptics available: %s", haptics.can_vibrate())

    window = PomodoroWindow(engine, settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
