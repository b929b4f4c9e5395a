"""Concrete emitters: uniform in all directions, directional within a cone, and explosions."""

from __future__ import annotations

import math
import random
from typing import MutableSequence

from partisim.emitter import Emitter
from partisim.particle import Particle
from partisim.vector import Vec2, normalize, rotate

_FULL_TURN = 2.0 * math.pi


class _RangedEmitter(Emitter):
    """An emitter whose particles get a random speed and lifetime from configurable ranges."""

    def __init__(
        self,
        position: Vec2,
        *,
        speed_range: tuple[float, float],
        lifetime_range: tuple[float, float],
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(position)
        self.min_speed, self.max_speed = speed_range
        self.min_lifetime, self.max_lifetime = lifetime_range
        self._rng = rng if rng is not None else random.Random()

    def set_speed_range(self, min_speed: float, max_speed: float) -> None:
        """Emit particles with speeds drawn uniformly from [min_speed, max_speed]."""
        self.min_speed = min_speed
        self.max_speed = max_speed

    def set_lifetime_range(self, min_lifetime: float, max_lifetime: float) -> None:
        """Emit particles with lifetimes drawn uniformly from [min_lifetime, max_lifetime]."""
        self.min_lifetime = min_lifetime
        self.max_lifetime = max_lifetime

    def _random_speed(self) -> float:
        return self._rng.uniform(self.min_speed, self.max_speed)

    def _random_lifetime(self) -> float:
        return self._rng.uniform(self.min_lifetime, self.max_lifetime)

    def _random_heading(self) -> Vec2:
        angle = self._rng.uniform(0.0, _FULL_TURN)
        return Vec2(math.cos(angle), math.sin(angle))


class UniformEmitter(_RangedEmitter):
    """Emits particles in uniformly random directions at a steady rate.

    Defaults: speeds 1.0 to 2.0, lifetimes 1.0 to 3.0.
    """

    def __init__(self, position: Vec2, *, rng: random.Random | None = None) -> None:
        super().__init__(
            position, speed_range=(1.0, 2.0), lifetime_range=(1.0, 3.0), rng=rng
        )

    def set_speed_range(self, min_speed: float, max_speed: float) -> None:
        super().set_speed_range(min_speed, max_speed)

    def set_lifetime_range(self, min_lifetime: float, max_lifetime: float) -> None:
        super().set_lifetime_range(min_lifetime, max_lifetime)

    def emit(self, particles: MutableSequence[Particle], dt: float) -> None:
        for _ in self._ticks(dt):
            heading = self._random_heading()
            speed = self._random_speed()
            lifetime = self._random_lifetime()
            self._spawn(particles, heading * speed, lifetime)


class DirectionalEmitter(_RangedEmitter):
    """Emits particles along ``direction``, deviating by up to ``spread`` radians either way.

    The direction is stored normalised. Defaults: spread pi/8, speeds 1.0 to 2.0,
    lifetimes 1.0 to 3.0.
    """

    def __init__(
        self, position: Vec2, direction: Vec2, *, rng: random.Random | None = None
    ) -> None:
        super().__init__(
            position, speed_range=(1.0, 2.0), lifetime_range=(1.0, 3.0), rng=rng
        )
        self._direction = normalize(direction)
        self.spread: float = math.pi / 8.0

    @property
    def direction(self) -> Vec2:
        return self._direction

    @direction.setter
    def direction(self, direction: Vec2) -> None:
        self._direction = normalize(direction)

    def set_speed_range(self, min_speed: float, max_speed: float) -> None:
        super().set_speed_range(min_speed, max_speed)

    def set_lifetime_range(self, min_lifetime: float, max_lifetime: float) -> None:
        super().set_lifetime_range(min_lifetime, max_lifetime)

    def emit(self, particles: MutableSequence[Particle], dt: float) -> None:
        for _ in self._ticks(dt):
            offset = self._rng.uniform(-self.spread, self.spread)
            speed = self._random_speed()
            lifetime = self._random_lifetime()
            heading = rotate(self._direction, offset)
            self._spawn(particles, heading * speed, lifetime)


class ExplosionEmitter(_RangedEmitter):
    """Emits a burst of ``particle_count`` particles in all directions once triggered.

    The rate is kept but plays no part in emission. Bursts are not capped by the
    particle limit. Defaults: 20 particles, speeds 1.0 to 5.0, lifetimes 0.5 to 2.0.
    """

    def __init__(self, position: Vec2, *, rng: random.Random | None = None) -> None:
        super().__init__(
            position, speed_range=(1.0, 5.0), lifetime_range=(0.5, 2.0), rng=rng
        )
        self.particle_count: int = 20
        self.triggered: bool = False

    def set_speed_range(self, min_speed: float, max_speed: float) -> None:
        super().set_speed_range(min_speed, max_speed)

    def set_lifetime_range(self, min_lifetime: float, max_lifetime: float) -> None:
        super().set_lifetime_range(min_lifetime, max_lifetime)

    def trigger(self) -> None:
        """Arm the emitter so the next call to :meth:`emit` produces a burst."""
        self.triggered = True

    def emit(self, particles: MutableSequence[Particle], dt: float) -> None:
        if not self.triggered:
            return
        for _ in range(self.particle_count):
            heading = self._random_heading()
            speed = self._random_speed()
            lifetime = self._random_lifetime()
            self._spawn(particles, heading * speed, lifetime, limit=None)
        self.triggered = False