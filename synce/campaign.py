"""Campaign director that escalates or calms down with weighted influences."""

from __future__ import annotations

from typing import Dict

from synce.fsm import FSM

CALM = "CALM"
ALERT = "ALERT"
ESCALATED = "ESCALATED"


class CampaignAI:
    """Three-level mood machine driven by chaos and resolve weights."""

    def __init__(self) -> None:
        self.fsm = FSM()
        self.weights: Dict[str, float] = {}

    @property
    def state(self) -> str:
        """The current mood."""
        return self.fsm.current_state

    def _weight(self, name: str) -> float:
        return self.weights.get(name, 0.0)

    def setup(self) -> None:
        """Register the moods and the conditions that move between them."""
        self.fsm.add_state(CALM, lambda: print("AI: Calm"))
        self.fsm.add_state(ALERT, lambda: print("AI: Alert"))
        self.fsm.add_state(ESCALATED, lambda: print("AI: Escalated"))

        self.fsm.add_transition(CALM, ALERT, lambda: self._weight("chaos") > 0.4)
        self.fsm.add_transition(ALERT, ESCALATED, lambda: self._weight("chaos") > 0.7)
        self.fsm.add_transition(ESCALATED, CALM, lambda: self._weight("resolve") > 0.8)

    def influence(self, chaos: float, resolve: float) -> None:
        """Set the chaos and resolve weights."""
        self.weights["chaos"] = chaos
        self.weights["resolve"] = resolve

    def update(self) -> bool:
        """Advance the mood machine by at most one step."""
        return self.fsm.update()