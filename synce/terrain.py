"""Procedural height-field terrain."""

from __future__ import annotations

import math
from typing import Iterator, List, Tuple

Vertex = Tuple[float, float, float]
Quad = Tuple[Vertex, Vertex, Vertex, Vertex]

_FREQUENCY = 0.1
_AMPLITUDE = 3.0


class Terrain:
    """A grid of heights following a sine–cosine pattern."""

    def __init__(self) -> None:
        self.width = 0
        self.depth = 0
        self._heights: List[float] = []

    @property
    def heights(self) -> Tuple[float, ...]:
        """All heights in row-major order, one row per z."""
        return tuple(self._heights)

    def generate(self, width: int, depth: int) -> None:
        """Fill a width by depth grid of heights."""
        if width < 0 or depth < 0:
            raise ValueError("terrain size must not be negative")
        self.width = width
        self.depth = depth
        self._heights = [
            math.sin(x * _FREQUENCY) * math.cos(z * _FREQUENCY) * _AMPLITUDE
            for z in range(depth)
            for x in range(width)
        ]

    def height(self, x: int, z: int) -> float:
        """Height at a grid point; raises IndexError outside the grid."""
        if not (0 <= x < self.width and 0 <= z < self.depth):
            raise IndexError(f"point ({x}, {z}) is outside the terrain")
        return self._heights[z * self.width + x]

    def quads(self) -> Iterator[Quad]:
        """Yield one four-vertex quad per grid cell, as (x, height, z) vertices."""
        for z in range(self.depth - 1):
            for x in range(self.width - 1):
                yield (
                    (x, self.height(x, z), z),
                    (x + 1, self.height(x + 1, z), z),
                    (x + 1, self.height(x + 1, z + 1), z + 1),
                    (x, self.height(x, z + 1), z + 1),
                )