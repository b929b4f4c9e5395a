"""An interactive scene: place emitters and effects, select them and run the simulation."""

from __future__ import annotations

from dataclasses import replace

from partisim.effects import Effect, Wind
from partisim.emitter import Emitter
from partisim.emitters import ExplosionEmitter
from partisim.particle import Particle
from partisim.scene import (
    Color,
    Markers,
    PlacementMode,
    SceneObject,
    SelectedType,
    Selection,
    build_markers,
    create_object,
    pick_object,
)
from partisim.system import ParticleSystem
from partisim.vector import Vec2

_BOUND = 1.0
_DEFAULT_RESTITUTION = 0.8


def _bounce_axis(
    coordinate: float, speed: float, restitution: float
) -> tuple[float, float]:
    """Clamp one coordinate to [-1, 1] and reflect its speed if it points outwards."""
    if coordinate < -_BOUND:
        return -_BOUND, (-speed * restitution if speed < 0.0 else speed)
    if coordinate > _BOUND:
        return _BOUND, (-speed * restitution if speed > 0.0 else speed)
    return coordinate, speed


class ParticleDemo:
    """A particle system with user-placed emitters and effects.

    Clicks either place the object chosen with :meth:`set_placement_mode` or select
    the nearest existing one. Living particles are kept inside the square [-1, 1]
    and bounce off its edges, losing speed by ``boundary_restitution``.
    """

    def __init__(self) -> None:
        self.system = ParticleSystem()
        self._emitters: list[Emitter] = []
        self._effects: list[Effect] = []
        self.placement_mode = PlacementMode.NONE
        self.selection = Selection()
        self.use_boundaries = True
        self.boundary_restitution = _DEFAULT_RESTITUTION
        self.positions: list[Vec2] = []
        self.colors: list[Color] = []
        self.sizes: list[float] = []
        self.markers = Markers()

    @property
    def emitters(self) -> tuple[Emitter, ...]:
        return tuple(self._emitters)

    @property
    def effects(self) -> tuple[Effect, ...]:
        return tuple(self._effects)

    @property
    def selected_object(self) -> SceneObject | None:
        """The currently selected emitter or effect, if any."""
        if self.selection.kind is SelectedType.EMITTER and self.selection.index < len(
            self._emitters
        ):
            return self._emitters[self.selection.index]
        if self.selection.kind is SelectedType.EFFECT and self.selection.index < len(
            self._effects
        ):
            return self._effects[self.selection.index]
        return None

    def update(self, time: float, dt: float, mouse_pos: Vec2) -> None:
        """Advance the scene to ``time`` by a step of ``dt`` and refresh drawing data.

        Explosion emitters are triggered every step and varying winds follow ``time``.
        ``mouse_pos`` is accepted for symmetry with clicks and plays no part.
        """
        for emitter in self._emitters:
            if isinstance(emitter, ExplosionEmitter):
                emitter.trigger()

        for effect in self._effects:
            if isinstance(effect, Wind):
                effect.update(time)

        self.system.update(dt)

        if self.use_boundaries:
            self.keep_within_bounds()

        self.positions, self.colors, self.sizes = self.system.particle_data()
        self.markers = build_markers(self._emitters, self._effects, self.selection)

    def handle_mouse_click(self, mouse_pos: Vec2) -> None:
        """Place the pending object at ``mouse_pos``, or select what lies there."""
        if self.placement_mode is PlacementMode.NONE:
            self.selection = pick_object(self._emitters, self._effects, mouse_pos)
            return

        created = create_object(self.placement_mode, mouse_pos)
        if isinstance(created, Emitter):
            self.system.add_emitter(created)
            self._emitters.append(created)
            self.selection = Selection(SelectedType.EMITTER, len(self._emitters) - 1)
        else:
            self.system.add_effect(created)
            self._effects.append(created)
            self.selection = Selection(SelectedType.EFFECT, len(self._effects) - 1)
        self.placement_mode = PlacementMode.NONE

    def set_placement_mode(self, mode: PlacementMode) -> None:
        """Make the next click place ``mode``'s object; clears the selection."""
        self.placement_mode = mode
        self.selection = replace(self.selection, kind=SelectedType.NONE)

    def cancel_placement(self) -> None:
        """Return to selecting objects without placing anything."""
        self.placement_mode = PlacementMode.NONE

    def delete_selected(self) -> SceneObject | None:
        """Remove the selected emitter or effect from the scene and return it."""
        target = self.selected_object
        if target is None:
            return None
        if self.selection.kind is SelectedType.EMITTER:
            self.system.remove_emitter(target)
            del self._emitters[self.selection.index]
        else:
            self.system.remove_effect(target)
            del self._effects[self.selection.index]
        self.selection = replace(self.selection, kind=SelectedType.NONE)
        return target

    def keep_within_bounds(self) -> None:
        """Clamp living particles to [-1, 1] and bounce those moving outwards."""
        bounded: list[Particle] = []
        for particle in self.system.particles:
            if particle.alive:
                x, vx = _bounce_axis(
                    particle.position.x, particle.velocity.x, self.boundary_restitution
                )
                y, vy = _bounce_axis(
                    particle.position.y, particle.velocity.y, self.boundary_restitution
                )
                particle = replace(
                    particle, position=Vec2(x, y), velocity=Vec2(vx, vy)
                )
            bounded.append(particle)
        self.system.particles = bounded