"""Path node scoring with a tunable leverage factor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(eq=False)
class PathNode:
    """A graph node with a score, a traversal weight and neighbours."""

    score: float = 0.0
    weight: float = 0.0
    visited: bool = False
    neighbors: List["PathNode"] = field(default_factory=list)


def compute_path_score(node: PathNode, leverage_factor: float) -> float:
    """Scale the node's score by leverage and add a bonus that falls with weight."""
    return node.score * leverage_factor + 1.0 / (1.0 + node.weight)