"""Simple ball physics under gravity with damped wall bounces."""

from __future__ import annotations

from dataclasses import dataclass

GRAVITY = 9.8
RESTITUTION = 0.8


@dataclass
class Ball:
    """A ball with position, velocity and radius."""

    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    radius: float = 0.0

    def update(self, dt: float) -> None:
        """Apply gravity to the velocity, then move by the new velocity."""
        self.vy -= GRAVITY * dt
        self.x += self.vx * dt
        self.y += self.vy * dt

    def check_bounds(self, width: float, height: float) -> None:
        """Bounce off the floor and side walls, losing some speed.

        The height is accepted for symmetry; there is no ceiling.
        """
        if self.y < self.radius:
            self.y = self.radius
            self.vy *= -RESTITUTION
        if self.x < self.radius or self.x > width - self.radius:
            self.vx *= -RESTITUTION