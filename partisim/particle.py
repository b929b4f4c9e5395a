"""The particle, the basic unit of the simulation."""

from __future__ import annotations

from dataclasses import dataclass, field

from partisim.vector import Vec2


@dataclass
class Particle:
    """A point mass with position, velocity, accumulated force and remaining lifetime.

    A freshly created particle sits at the origin, at rest and not alive.
    """

    position: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    force: Vec2 = field(default_factory=Vec2)
    lifetime: float = 0.0
    alive: bool = False

    def update(self, dt: float) -> None:
        """Advance the particle by ``dt`` seconds with forward Euler and age it."""
        self.velocity = self.velocity + self.force * dt
        self.position = self.position + self.velocity * dt
        self.lifetime -= dt
        if self.lifetime <= 0.0:
            self.alive = False

    def reset_force(self) -> None:
        """Clear the accumulated force."""
        self.force = Vec2(0.0, 0.0)