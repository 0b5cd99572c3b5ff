"""
Synthesised sound cues played through Arcade.

The three cues are short single tones:
    jump      - square wave, 400 Hz, 0.1 s
    collect   - sine wave,   800 Hz, 0.1 s
    game_over - sawtooth,    150 Hz, 0.5 s
"""

from __future__ import annotations

import logging
import os
import tempfile
import wave
from typing import Dict, Optional

import numpy as np
import arcade

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
START_GAIN = 0.1
END_GAIN = 0.01

TONES = {
    "jump": (400.0, "square", 0.1),
    "collect": (800.0, "sine", 0.1),
    "game_over": (150.0, "sawtooth", 0.5),
}


def tone_samples(freq: float, waveform: str, duration: float,
                 sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Mono int16 samples with an exponential fade from START_GAIN to END_GAIN"""
    t = np.arange(int(sample_rate * duration)) / sample_rate
    phase = freq * t

    if waveform == "sine":
        wave_ = np.sin(2 * np.pi * phase)
    elif waveform == "square":
        wave_ = np.where(np.sin(2 * np.pi * phase) >= 0, 1.0, -1.0)
    elif waveform == "sawtooth":
        wave_ = 2.0 * (phase - np.floor(phase + 0.5))
    else:
        raise ValueError(f"Unknown waveform: {waveform}")

    envelope = START_GAIN * (END_GAIN / START_GAIN) ** (t / duration)
    return (wave_ * envelope * 32767).astype(np.int16)


def write_wav(path: str, samples: np.ndarray, sample_rate: int = SAMPLE_RATE):
    with wave.open(path, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(sample_rate)
        wf.writeframes(samples.tobytes())


class ToneBank:
    """
    Audio collaborator for HopGame. Sounds that fail to build or play are
    logged once and then skipped.
    """

    def __init__(self, cache_dir: Optional[str] = None, volume: float = 1.0):
        self.cache_dir = cache_dir or os.path.join(tempfile.gettempdir(), "bunny_hop_sounds")
        self.volume = volume
        self._sounds: Dict[str, Optional[arcade.Sound]] = {}
        for cue in TONES:
            self._sounds[cue] = self._load(cue)

    def _load(self, cue: str) -> Optional[arcade.Sound]:
        freq, waveform, duration = TONES[cue]
        path = os.path.join(self.cache_dir, f"{cue}.wav")
        try:
            os.makedirs(self.cache_dir, exist_ok=True)
            write_wav(path, tone_samples(freq, waveform, duration))
            return arcade.load_sound(path)
        except Exception as exc:  # audio backends raise a variety of errors
            logger.warning("Sound '%s' unavailable: %s", cue, exc)
            return None

    def play(self, cue: str):
        sound = self._sounds.get(cue)
        if sound is None:
            return
        try:
            arcade.play_sound(sound, volume=self.volume)
        except Exception as exc:
            logger.warning("Could not play '%s', muting it: %s", cue, exc)
            self._sounds[cue] = None
