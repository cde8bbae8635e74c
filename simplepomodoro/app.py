"""Main application window for Simple Pomodoro."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow

from .timer.engine import TimerEngine, Mode
from .ui.timer_widget import TimerWidget
from .ui.styles import build_stylesheet
from .settings import Settings, load_settings, save_settings


logger = logging.getLogger(__name__)


class PomodoroWindow(QMainWindow):
    """The single timer window.  Owns nothing but the view; the engine is
    handed in by whoever created it."""

    def __init__(
        self,
        engine: TimerEngine,
        settings: Settings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Simple Pomodoro")
        self.setMinimumSize(320, 560)

        self._engine = engine
        self._settings: Settings = settings if settings is not None else load_settings()

        # ── geometry save debounce ─────────────────────────────────────
        self._geometry_save_timer = QTimer(self)
        self._geometry_save_timer.setSingleShot(True)
        self._geometry_save_timer.setInterval(500)
        self._geometry_save_timer.timeout.connect(self._save_geometry)

        self._timer_widget = TimerWidget(engine, self)
        self.setCentralWidget(self._timer_widget)
        self.setStyleSheet(build_stylesheet())

        self._engine.mode_completed.connect(self._on_mode_completed)

        self._setup_shortcuts()
        self._restore_geometry()
        if self._settings.always_on_top:
            self._apply_always_on_top(True)

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    @property
    def settings(self) -> Settings:
        return self._settings

    # ══════════════════════════════════════════════════════════════════
    #  ENGINE EVENTS
    # ══════════════════════════════════════════════════════════════════

    def _on_mode_completed(self, finished: Mode) -> None:
        title = "Break" if finished == Mode.FOCUS else "Focus"
        self.setWindowTitle(f"Simple Pomodoro · {title}")

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _setup_shortcuts(self) -> None:
        """Register Ctrl+Shift+T for always-on-top (Space/R via keyPressEvent)."""
        aot = QAction("Always on Top", self)
        aot.setCheckable(True)
        aot.setChecked(self._settings.always_on_top)
        aot.setShortcut(QKeySequence("Ctrl+Shift+T"))
        aot.triggered.connect(self._toggle_always_on_top)
        self.addAction(aot)
        self._aot_action = aot

    def _on_space(self) -> None:
        """Start or stop the timer."""
        self._engine.toggle()

    def _on_reset(self) -> None:
        self._engine.reset_timer()

    def _toggle_always_on_top(self) -> None:
        new_val = not self._settings.always_on_top
        self._settings.always_on_top = new_val
        save_settings(self._settings)
        self._aot_action.setChecked(new_val)
        self._apply_always_on_top(new_val)

    def _apply_always_on_top(self, on_top: bool) -> None:
        flags = self.windowFlags()
        if on_top:
            flags |= Qt.WindowType.WindowStaysOnTopHint
        else:
            flags &= ~Qt.WindowType.WindowStaysOnTopHint
        was_visible = self.isVisible()
        self.setWindowFlags(flags)
        if was_visible:
            self.show()  # setWindowFlags hides the window

    # ══════════════════════════════════════════════════════════════════
    #  GEOMETRY
    # ══════════════════════════════════════════════════════════════════

    def _restore_geometry(self) -> None:
        s = self._settings
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)
        if s.window_width and s.window_height:
            self.resize(s.window_width, s.window_height)

    def _save_geometry(self) -> None:
        """Persist current window geometry to settings."""
        if not self.isVisible():
            return
        pos = self.pos()
        size = self.size()
        self._settings.window_x = pos.x()
        self._settings.window_y = pos.y()
        self._settings.window_width = size.width()
        self._settings.window_height = size.height()
        try:
            save_settings(self._settings)
        except OSError:
            logger.warning("Could not save window geometry", exc_info=True)

    def _schedule_geometry_save(self) -> None:
        self._geometry_save_timer.start()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Stop the countdown and remember where the window was."""
        self._geometry_save_timer.stop()
        self._save_geometry()
        self._engine.shutdown()
        event.accept()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._schedule_geometry_save()

    def moveEvent(self, event) -> None:  # type: ignore[override]
        super().moveEvent(event)
        self._schedule_geometry_save()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Space starts/stops, R or Escape resets."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key in (Qt.Key.Key_R, Qt.Key.Key_Escape) and not event.modifiers():
            self._on_reset()
            event.accept()
            return
        super().keyPressEvent(event)
