"""Finite-state machines: a named-state machine with guarded transitions,
and a minimal numeric state holder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

EnterHandler = Callable[[], None]
Condition = Callable[[], bool]


class FSM:
    """State machine whose transitions fire when their condition holds."""

    def __init__(self) -> None:
        self._states: Dict[str, EnterHandler] = {}
        self._transitions: List[Tuple[str, str, Condition]] = []
        self.current_state: str = ""

    @property
    def states(self) -> Tuple[str, ...]:
        """Names of the registered states, in registration order."""
        return tuple(self._states)

    def add_state(self, name: str, on_enter: EnterHandler) -> None:
        """Register a state; the first state added becomes current and is entered."""
        self._states[name] = on_enter
        if not self.current_state:
            self.current_state = name
            on_enter()

    def add_transition(self, source: str, target: str, condition: Condition) -> None:
        """Add a transition from source to target, taken when condition() is true."""
        self._transitions.append((source, target, condition))

    def update(self) -> bool:
        """Take the first transition out of the current state whose condition holds.

        Returns True if a transition was taken. Raises KeyError if the target
        state was never registered.
        """
        for source, target, condition in self._transitions:
            if source == self.current_state and condition():
                on_enter = self._states[target]
                print(f"FSM: {source} → {target}")
                self.current_state = target
                on_enter()
                return True
        return False


@dataclass
class FSMNode:
    """A bare state number paired with the handler for that state."""

    state: int = 0
    handler: Optional[Callable[[Any], None]] = None

    def transition(self, new_state: int, handler: Optional[Callable[[Any], None]]) -> None:
        """Switch to a new state and handler."""
        self.state = new_state
        self.handler = handler