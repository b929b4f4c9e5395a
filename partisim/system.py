"""The particle system: owns the particles and drives emitters and effects."""

from __future__ import annotations

from typing import Iterable

from partisim.effects import Effect
from partisim.emitter import Emitter
from partisim.particle import Particle
from partisim.vector import Vec2

Color = tuple[float, float, float, float]

_FADE_TIME = 2.0
_BASE_SIZE = 0.02


class ParticleSystem:
    """Holds particles, emitters and effects and advances them together."""

    def __init__(self) -> None:
        self._particles: list[Particle] = []
        self._emitters: list[Emitter] = []
        self._effects: list[Effect] = []

    @property
    def particles(self) -> tuple[Particle, ...]:
        """The particles currently in the system."""
        return tuple(self._particles)

    @particles.setter
    def particles(self, particles: Iterable[Particle]) -> None:
        self._particles = list(particles)

    @property
    def emitters(self) -> tuple[Emitter, ...]:
        return tuple(self._emitters)

    @property
    def effects(self) -> tuple[Effect, ...]:
        return tuple(self._effects)

    def update(self, dt: float) -> None:
        """Advance the simulation by ``dt`` seconds.

        Emitters run first, then forces are reset, enabled effects are applied to
        living particles, every particle is integrated, and dead ones are dropped.
        """
        for emitter in self._emitters:
            emitter.emit(self._particles, dt)

        for particle in self._particles:
            particle.reset_force()

        living = [p for p in self._particles if p.alive]
        for effect in self._effects:
            if effect.enabled:
                for particle in living:
                    effect.apply(particle)

        for particle in self._particles:
            particle.update(dt)

        self._particles = [p for p in self._particles if p.alive]

    def add_emitter(self, emitter: Emitter | None) -> None:
        """Add ``emitter``; ``None`` is ignored."""
        if emitter is not None:
            self._emitters.append(emitter)

    def remove_emitter(self, emitter: Emitter) -> None:
        """Remove ``emitter`` if it is present."""
        _remove_identical(self._emitters, emitter)

    def add_effect(self, effect: Effect | None) -> None:
        """Add ``effect``; ``None`` is ignored."""
        if effect is not None:
            self._effects.append(effect)

    def remove_effect(self, effect: Effect) -> None:
        """Remove ``effect`` if it is present."""
        _remove_identical(self._effects, effect)

    def particle_data(self) -> tuple[list[Vec2], list[Color], list[float]]:
        """Return positions, colours and sizes of the living particles for drawing.

        Particles fade out and shrink over their last two seconds of life.
        """
        positions: list[Vec2] = []
        colors: list[Color] = []
        sizes: list[float] = []
        for particle in self._particles:
            if not particle.alive:
                continue
            life_factor = min(1.0, particle.lifetime / _FADE_TIME)
            positions.append(particle.position)
            colors.append((1.0, 1.0, 1.0, life_factor))
            sizes.append(_BASE_SIZE + _BASE_SIZE * life_factor)
        return positions, colors, sizes

    def clear_particles(self) -> None:
        self._particles.clear()

    def clear_emitters(self) -> None:
        self._emitters.clear()

    def clear_effects(self) -> None:
        self._effects.clear()


def _remove_identical(items: list, target: object) -> None:
    for index, item in enumerate(items):
        if item is target:
            del items[index]
            return