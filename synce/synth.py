"""Waveform synthesiser driven by a compact character-coded node list."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

SAMPLE_RATE = 44100
FRAME_STEP = 4410  # one reported frame every 0.1 s
_CHUNK = 4


class WaveType(Enum):
    """Oscillator shapes, numbered as in the node encoding."""

    SINE = 0
    SQUARE = 1
    TRIANGLE = 2
    SAW = 3
    NOISE = 4


@dataclass
class WaveformNode:
    """One tone: its shape, pitch, loudness and length in seconds."""

    type: WaveType
    frequency: float
    amplitude: float
    duration: float
    phase: int = 0


def _decode(chunk: str) -> WaveformNode:
    shape, pitch, level, length = (ord(ch) for ch in chunk.ljust(_CHUNK, "\0"))
    return WaveformNode(
        type=WaveType(shape % 5),
        frequency=220.0 + pitch % 100,
        amplitude=(level % 16) / 15.0,
        duration=((length % 10) + 1) * 0.1,
    )


class AudioSynth:
    """Decodes waveform nodes and renders them to a sample list."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._nodes: List[WaveformNode] = []
        self._output: List[float] = []

    @property
    def nodes(self) -> Tuple[WaveformNode, ...]:
        return tuple(self._nodes)

    @property
    def output(self) -> Tuple[float, ...]:
        return tuple(self._output)

    def load_hex_ast(self, hex_text: str) -> None:
        """Append one node per four characters; a short final chunk is zero-padded."""
        self._nodes.extend(
            _decode(hex_text[start:start + _CHUNK])
            for start in range(0, len(hex_text), _CHUNK)
        )

    def _sample(self, node: WaveformNode, t: float) -> float:
        cycles = t * node.frequency
        if node.type is WaveType.SINE:
            return node.amplitude * math.sin(2.0 * math.pi * cycles)
        if node.type is WaveType.SQUARE:
            return node.amplitude * (1.0 if math.sin(2.0 * math.pi * cycles) > 0 else -1.0)
        if node.type is WaveType.TRIANGLE:
            return node.amplitude * (2.0 * abs(2.0 * (cycles - math.floor(cycles + 0.5))) - 1.0)
        if node.type is WaveType.SAW:
            return node.amplitude * (2.0 * (cycles - math.floor(cycles + 0.5)))
        return node.amplitude * (self._rng.randrange(2000) / 1000.0 - 1.0)

    def generate(self) -> None:
        """Render every loaded node in order and append the samples to the output."""
        for node in self._nodes:
            # A small bias keeps products such as 0.8 * 44100 from truncating down.
            count = int(node.duration * SAMPLE_RATE + 1e-6)
            self._output.extend(self._sample(node, i / SAMPLE_RATE) for i in range(count))

    def play(self) -> None:
        """Print one output sample per tenth of a second."""
        print("[Synth Playback Start]")
        for index in range(0, len(self._output), FRAME_STEP):
            print(f"Frame[{index}] = {self._output[index]:g}")
        print("[Synth Playback Done]")