"""Best-effort "haptic" pulse for mode completion.

Desktops have no vibration motor, so the heavy feedback pulse is a short
low-frequency thump synthesised with numpy and played through
``QSoundEffect``.  The WAV is generated once and cached on disk.

Nothing in here may raise into the caller: the timer fires the pulse and
forgets about it.
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QMediaDevices, QSoundEffect

from ..settings import APP_SUPPORT_DIR


logger = logging.getLogger(__name__)


# ── paths ────────────────────────────────────────────────────────────────

CACHE_DIR = APP_SUPPORT_DIR / "feedback"
PULSE_FILENAME = "heavy_pulse.wav"

SAMPLE_RATE = 44100


# ═══════════════════════════════════════════════════════════════════════════
#  SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════════


def _envelope(length: int, attack: int, release: int) -> np.ndarray:
    """Linear attack/release envelope, flat in between (samples)."""
    env = np.ones(length, dtype=np.float64)
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    r = min(release, length - a)
    if r > 0:
        env[length - r:] = np.linspace(1.0, 0.0, r)
    return env


def _tone(freq: float, duration_s: float) -> np.ndarray:
    t = np.arange(int(SAMPLE_RATE * duration_s)) / SAMPLE_RATE
    return np.sin(2 * np.pi * freq * t)


def _pcm16_wav(samples: np.ndarray) -> bytes:
    """Encode float samples in -1..1 as mono 16-bit PCM WAV bytes."""
    pcm = (np.clip(samples, -1.0, 1.0) * 32767).astype(np.int16)
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(pcm.tobytes())
    return buf.getvalue()


def generate_heavy_pulse() -> bytes:
    """A 90 ms thump at 150 Hz with a sub-octave for weight."""
    duration = 0.09
    body = _tone(150.0, duration) * 0.7 + _tone(75.0, duration) * 0.25
    env = _envelope(len(body), attack=int(SAMPLE_RATE * 0.004),
                    release=int(SAMPLE_RATE * 0.06))
    # Trailing silence keeps QSoundEffect from clipping the tail.
    tail = np.zeros(int(SAMPLE_RATE * 0.04))
    return _pcm16_wav(np.concatenate([body * env, tail]))


# ═══════════════════════════════════════════════════════════════════════════
#  FEEDBACK
# ═══════════════════════════════════════════════════════════════════════════


class HapticFeedback(QObject):
    """Fire-and-forget completion pulse.

    Usage::

        haptics = HapticFeedback(parent=self)
        haptics.pulse()
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        cache_dir: Path | None = None,
        enabled: bool = True,
        volume: int = 80,
    ) -> None:
        super().__init__(parent)
        self._enabled = enabled
        self._volume = max(0, min(volume, 100)) / 100.0
        self._cache_dir = cache_dir or CACHE_DIR
        self._effect: QSoundEffect | None = None

        try:
            path = self._ensure_wav()
            self._effect = QSoundEffect(self)
            self._effect.setSource(QUrl.fromLocalFile(str(path)))
            self._effect.setVolume(self._volume)
        except Exception:
            logger.debug("haptic pulse unavailable", exc_info=True)
            self._effect = None

    # ── public API ────────────────────────────────────────────────────

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    @property
    def volume(self) -> int:
        return round(self._volume * 100)

    def set_volume(self, level: int) -> None:
        self._volume = max(0, min(level, 100)) / 100.0
        if self._effect is not None:
            self._effect.setVolume(self._volume)

    @property
    def pulse_path(self) -> Path:
        return self._cache_dir / PULSE_FILENAME

    def can_vibrate(self) -> bool:
        """True when there is an output device and a playable pulse."""
        try:
            if self._effect is None:
                return False
            if self._effect.status() == QSoundEffect.Status.Error:
                return False
            return len(QMediaDevices.audioOutputs()) > 0
        except Exception:
            logger.debug("haptic capability query failed", exc_info=True)
            return False

    def pulse(self) -> None:
        """Play the pulse.  Never raises; returns immediately."""
        if not self._enabled:
            return
        try:
            if self.can_vibrate():
                self._effect.play()
        except Exception:
            logger.debug("haptic pulse failed", exc_info=True)

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav(self) -> Path:
        self._cache_dir.mkdir(parents=True, exist_ok=True)
        path = self.pulse_path
        if not path.exists():
            path.write_bytes(generate_heavy_pulse())
        return path
