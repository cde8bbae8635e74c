"""Shared pytest fixtures for Simple Pomodoro tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from simplepomodoro.timer.engine import TimerEngine

from helpers import FakeHaptics


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def settings_path(tmp_path, monkeypatch):
    """Keep every test away from the real settings file."""
    path = tmp_path / "settings.json"
    monkeypatch.setattr("simplepomodoro.settings.SETTINGS_PATH", path)
    yield path


@pytest.fixture
def haptics():
    return FakeHaptics()


@pytest.fixture
def engine(qapp, haptics):
    """Fresh TimerEngine wired to a recording haptics stub."""
    return TimerEngine(parent=None, haptics=haptics)


@pytest.fixture
def bare_engine(qapp):
    """TimerEngine without any haptics collaborator."""
    return TimerEngine(parent=None)
