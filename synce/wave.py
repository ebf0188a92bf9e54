"""Single-sample procedural waveforms for sound IR nodes."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Waveform(Enum):
    """Basic oscillator shapes."""

    SINE = "sine"
    SQUARE = "square"
    NOISE = "noise"


@dataclass
class SoundIRNode:
    """A sound node: shape, angular frequency and modulation depth."""

    type: Waveform
    frequency: float
    modulation: float = 0.0


def generate_wave(node: SoundIRNode, time: float, rng: Optional[random.Random] = None) -> float:
    """Return the node's value at a time; noise draws uniformly from [-1, 1]."""
    if node.type is Waveform.SINE:
        return math.sin(time * node.frequency)
    if node.type is Waveform.SQUARE:
        return 1.0 if math.sin(time * node.frequency) > 0 else -1.0
    if node.type is Waveform.NOISE:
        source = rng if rng is not None else random
        return source.random() * 2.0 - 1.0
    return 0.0


def process_audio_frame(time: float) -> float:
    """Produce one sample of a 440 sine tone at the given time."""
    return generate_wave(SoundIRNode(Waveform.SINE, 440.0, 0.0), time)