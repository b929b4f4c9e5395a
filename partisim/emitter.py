"""Base class for objects that put particles into the simulation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, MutableSequence

from partisim.particle import Particle
from partisim.vector import Vec2

PARTICLE_LIMIT = 10_000
"""Rate-driven emitters stop adding new particles once a list holds this many."""


class Emitter(ABC):
    """Creates particles at ``position``, ``rate`` particles per second (default 1.0)."""

    def __init__(self, position: Vec2) -> None:
        self.position = position
        self.rate: float = 1.0
        self.accumulator: float = 0.0

    @abstractmethod
    def emit(self, particles: MutableSequence[Particle], dt: float) -> None:
        """Add or revive particles in ``particles`` for a step of ``dt`` seconds."""

    def _ticks(self, dt: float) -> Iterator[None]:
        """Accumulate ``dt`` and yield once for every particle now due."""
        self.accumulator += dt
        if self.rate <= 0.0:
            return
        interval = 1.0 / self.rate
        while self.accumulator >= interval:
            yield
            self.accumulator -= interval

    def _spawn(
        self,
        particles: MutableSequence[Particle],
        velocity: Vec2,
        lifetime: float,
        limit: int | None = PARTICLE_LIMIT,
    ) -> bool:
        """Revive the first dead particle, or append a new one below ``limit``.

        Returns whether a particle was placed.
        """
        target = next((p for p in particles if not p.alive), None)
        if target is None:
            if limit is not None and len(particles) >= limit:
                return False
            target = Particle()
            particles.append(target)
        target.position = self.position
        target.velocity = velocity
        target.force = Vec2(0.0, 0.0)
        target.lifetime = lifetime
        target.alive = True
        return True