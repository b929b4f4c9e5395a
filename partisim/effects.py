"""Effects that push particles around: the base class, gravity wells and wind."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from partisim.particle import Particle
from partisim.vector import Vec2, normalize, rotate

_MIN_WELL_DISTANCE = 0.1


class Effect(ABC):
    """Something that adds force to particles.

    Every effect has a ``strength`` (default 1.0) and can be switched off with ``enabled``.
    """

    def __init__(self) -> None:
        self.strength: float = 1.0
        self.enabled: bool = True

    @abstractmethod
    def apply(self, particle: Particle) -> None:
        """Add this effect's force to ``particle``."""


class GravityWell(Effect):
    """Pulls particles towards a point.

    Inside ``radius`` the pull equals ``strength``; beyond it the pull falls off with the
    square of the distance. Particles closer than 0.1 are left alone.
    """

    def __init__(self, position: Vec2, radius: float = 100.0) -> None:
        super().__init__()
        self.position = position
        self.radius = radius

    def apply(self, particle: Particle) -> None:
        if not self.enabled or not particle.alive:
            return

        offset = self.position - particle.position
        distance = math.hypot(offset.x, offset.y)
        if distance < _MIN_WELL_DISTANCE:
            return

        if distance < self.radius:
            magnitude = self.strength
        else:
            ratio = self.radius / distance
            magnitude = self.strength * ratio * ratio

        particle.force = particle.force + normalize(offset) * magnitude


class Wind(Effect):
    """A uniform force in one direction, optionally wavering over time.

    The direction is always stored normalised. A wind may also carry a position, used
    only to show and pick it in a scene.
    """

    def __init__(self, direction: Vec2) -> None:
        super().__init__()
        self._direction = normalize(direction)
        self.current_direction = self._direction
        self._varying = False
        self._position = Vec2()
        self._has_position = False

    @property
    def direction(self) -> Vec2:
        return self._direction

    @direction.setter
    def direction(self, direction: Vec2) -> None:
        self._direction = normalize(direction)
        if not self._varying:
            self.current_direction = self._direction

    @property
    def varying(self) -> bool:
        return self._varying

    @varying.setter
    def varying(self, varying: bool) -> None:
        self._varying = varying
        if not varying:
            self.current_direction = self._direction

    @property
    def position(self) -> Vec2:
        return self._position

    @position.setter
    def position(self, position: Vec2) -> None:
        self._position = position
        self._has_position = True

    @property
    def has_position(self) -> bool:
        return self._has_position

    def apply(self, particle: Particle) -> None:
        if not self.enabled or not particle.alive:
            return
        particle.force = particle.force + self.current_direction * self.strength

    def update(self, time: float) -> None:
        """Recompute the wavering direction for ``time`` if the wind varies."""
        if self._varying:
            angle = 0.2 * math.sin(time * 0.5) + 0.1 * math.sin(time * 1.1)
            self.current_direction = rotate(self._direction, angle)