"""Weighted event scoring with an averaging evaluator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

UPSCALE_FACTOR = 1.25


@dataclass
class ScoreEvent:
    """One scored input: its magnitude, weight, their product and final score."""

    input_magnitude: float
    weight: float
    scaled: float
    final_score: float


class ScoreEngine:
    """Collects events and reports their mean score."""

    def __init__(self, upscale_factor: float = UPSCALE_FACTOR) -> None:
        self.upscale_factor = upscale_factor
        self._events: List[ScoreEvent] = []

    @property
    def events(self) -> Tuple[ScoreEvent, ...]:
        """The recorded events, oldest first."""
        return tuple(self._events)

    def add_event(self, magnitude: float, weight: float) -> ScoreEvent:
        """Record an event scored as ten times the root of magnitude times weight.

        A negative product scores NaN.
        """
        scaled = magnitude * weight
        score = math.sqrt(scaled) * 10.0 if scaled >= 0 else math.nan
        event = ScoreEvent(magnitude, weight, scaled, score)
        self._events.append(event)
        return event

    def evaluate(self) -> float:
        """Mean final score of all events; NaN when there are none."""
        if not self._events:
            return math.nan
        return sum(e.final_score for e in self._events) / len(self._events)

    def upscale_output(self) -> None:
        """Multiply every final score by the upscale factor."""
        for event in self._events:
            event.final_score *= self.upscale_factor