# src/zentask/notify/tones.py

"""
Alert tones generated programmatically (no audio assets shipped).

Three deterministic profiles:
- beep:  short square wave, 440 Hz, 0.1 s
- chime: sine gliding 523.25 -> 880 Hz over 0.1 s, exponential decay over 1 s
- pulse: triangle wave, 220 Hz, linear fade-out over 0.5 s
"""

from __future__ import annotations

import numpy as np

from ..core.models import SoundType

SAMPLE_RATE = 44100
PEAK_GAIN = 0.1

TONE_DURATIONS: dict[SoundType, float] = {
    SoundType.BEEP: 0.1,
    SoundType.CHIME: 1.0,
    SoundType.PULSE: 0.5,
}


def _timeline(duration: float, sample_rate: int) -> np.ndarray:
    n = int(round(duration * sample_rate))
    return np.arange(n, dtype=np.float64) / sample_rate


def _phase(freq: np.ndarray, sample_rate: int) -> np.ndarray:
    # Integrate instantaneous frequency so glides stay click-free.
    return 2.0 * np.pi * np.cumsum(freq) / sample_rate


def _beep(sample_rate: int) -> np.ndarray:
    t = _timeline(TONE_DURATIONS[SoundType.BEEP], sample_rate)
    wave = np.sign(np.sin(2.0 * np.pi * 440.0 * t))
    return PEAK_GAIN * wave


def _chime(sample_rate: int) -> np.ndarray:
    duration = TONE_DURATIONS[SoundType.CHIME]
    t = _timeline(duration, sample_rate)
    glide = 0.1
    ratio = 880.0 / 523.25
    freq = np.where(t < glide, 523.25 * ratio ** (t / glide), 880.0)
    gain = PEAK_GAIN * (0.001 / PEAK_GAIN) ** (t / duration)
    return gain * np.sin(_phase(freq, sample_rate))


def _pulse(sample_rate: int) -> np.ndarray:
    duration = TONE_DURATIONS[SoundType.PULSE]
    t = _timeline(duration, sample_rate)
    cycles = 220.0 * t
    triangle = 2.0 * np.abs(2.0 * (cycles - np.floor(cycles + 0.5))) - 1.0
    gain = PEAK_GAIN * (1.0 - t / duration)
    return gain * triangle


_SYNTHS = {
    SoundType.BEEP: _beep,
    SoundType.CHIME: _chime,
    SoundType.PULSE: _pulse,
}


def synthesize(kind: SoundType, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Return mono float32 samples in [-PEAK_GAIN, PEAK_GAIN] for `kind`."""
    return _SYNTHS[SoundType(kind)](sample_rate).astype(np.float32)
