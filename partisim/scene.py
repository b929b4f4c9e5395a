"""Scene helpers: placing emitters and effects, picking them and building their markers."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Sequence, Union

from partisim.effects import Effect, GravityWell, Wind
from partisim.emitter import Emitter
from partisim.emitters import DirectionalEmitter, ExplosionEmitter, UniformEmitter
from partisim.vector import Vec2, length

Color = tuple[float, float, float, float]
SceneObject = Union[Emitter, Effect]

SELECTION_THRESHOLD = 0.1
"""Objects further than this from a click are never picked."""

SELECTED_COLOR: Color = (1.0, 1.0, 1.0, 1.0)
EMITTER_COLOR: Color = (0.2, 0.2, 0.9, 1.0)
EFFECT_COLOR: Color = (0.9, 0.2, 0.2, 1.0)
MARKER_SIZE = 10.20
SELECTED_MARKER_SIZE = 10.25
ARROW_SIZE = 5.0
ARROW_LENGTH = 0.15
WIND_FALLBACK_POSITION = Vec2(0.8, 0.0)

_MIN_ARROW_DIRECTION = 0.001


class PlacementMode(enum.Enum):
    """What a click in the scene places, if anything."""

    NONE = "none"
    UNIFORM_EMITTER = "uniform_emitter"
    DIRECTIONAL_EMITTER = "directional_emitter"
    EXPLOSION_EMITTER = "explosion_emitter"
    GRAVITY_WELL = "gravity_well"
    WIND = "wind"


class SelectedType(enum.Enum):
    """Which list a selection refers to."""

    NONE = "none"
    EMITTER = "emitter"
    EFFECT = "effect"


@dataclass(frozen=True)
class Selection:
    """A selected emitter or effect, identified by its index in its list."""

    kind: SelectedType = SelectedType.NONE
    index: int = 0

    def is_emitter(self, index: int) -> bool:
        return self.kind is SelectedType.EMITTER and self.index == index

    def is_effect(self, index: int) -> bool:
        return self.kind is SelectedType.EFFECT and self.index == index


@dataclass
class Markers:
    """Points that show emitters and effects, ready for drawing."""

    positions: list[Vec2] = field(default_factory=list)
    colors: list[Color] = field(default_factory=list)
    sizes: list[float] = field(default_factory=list)

    def add(self, position: Vec2, color: Color, size: float) -> None:
        self.positions.append(position)
        self.colors.append(color)
        self.sizes.append(size)

    def __len__(self) -> int:
        return len(self.positions)


def effect_position(effect: Effect) -> Vec2 | None:
    """Return where ``effect`` sits in the scene, or ``None`` if it has no place."""
    if isinstance(effect, GravityWell):
        return effect.position
    if isinstance(effect, Wind) and effect.has_position:
        return effect.position
    return None


def build_markers(
    emitters: Sequence[Emitter], effects: Sequence[Effect], selection: Selection
) -> Markers:
    """Build one marker per emitter and per placed effect.

    A selected object is drawn white and slightly larger; a selected wind also gets a
    small marker showing its direction. A wind without a position is shown at a fixed
    point on the right; other effects without a position get no marker.
    """
    markers = Markers()

    for index, emitter in enumerate(emitters):
        if selection.is_emitter(index):
            markers.add(emitter.position, SELECTED_COLOR, SELECTED_MARKER_SIZE)
        else:
            markers.add(emitter.position, EMITTER_COLOR, MARKER_SIZE)

    for index, effect in enumerate(effects):
        selected = selection.is_effect(index)

        if isinstance(effect, Wind):
            position = effect.position if effect.has_position else WIND_FALLBACK_POSITION
            if selected:
                markers.add(position, SELECTED_COLOR, SELECTED_MARKER_SIZE)
                direction = effect.direction
                magnitude = length(direction)
                if magnitude > _MIN_ARROW_DIRECTION:
                    tip = position + (direction / magnitude) * ARROW_LENGTH
                    markers.add(tip, SELECTED_COLOR, ARROW_SIZE)
            else:
                markers.add(position, EFFECT_COLOR, MARKER_SIZE)
            continue

        position = effect_position(effect)
        if position is None:
            continue
        if selected:
            markers.add(position, SELECTED_COLOR, SELECTED_MARKER_SIZE)
        else:
            markers.add(position, EFFECT_COLOR, MARKER_SIZE)

    return markers


def _closest(points: Sequence[Vec2 | None], target: Vec2) -> tuple[int, float] | None:
    best: tuple[int, float] | None = None
    best_distance = SELECTION_THRESHOLD
    for index, point in enumerate(points):
        if point is None:
            continue
        distance = length(point - target)
        if distance < best_distance:
            best_distance = distance
            best = (index, distance)
    return best


def pick_object(
    emitters: Sequence[Emitter], effects: Sequence[Effect], position: Vec2
) -> Selection:
    """Select the emitter or effect nearest to ``position`` within the threshold.

    On equal distance an emitter wins. Returns an empty selection if nothing is near.
    """
    emitter_hit = _closest([e.position for e in emitters], position)
    effect_hit = _closest([effect_position(e) for e in effects], position)

    if emitter_hit is not None and (effect_hit is None or emitter_hit[1] <= effect_hit[1]):
        return Selection(SelectedType.EMITTER, emitter_hit[0])
    if effect_hit is not None:
        return Selection(SelectedType.EFFECT, effect_hit[0])
    return Selection()


def create_object(mode: PlacementMode, position: Vec2) -> SceneObject:
    """Create the emitter or effect that ``mode`` places, configured for the scene.

    Raises ``ValueError`` for :attr:`PlacementMode.NONE`.
    """
    if mode is PlacementMode.UNIFORM_EMITTER:
        uniform = UniformEmitter(position)
        uniform.rate = 20.0
        uniform.set_speed_range(0.1, 0.3)
        uniform.set_lifetime_range(3.0, 5.0)
        return uniform

    if mode is PlacementMode.DIRECTIONAL_EMITTER:
        directional = DirectionalEmitter(position, Vec2(0.0, 1.0))
        directional.rate = 15.0
        directional.spread = math.pi / 12.0
        directional.set_speed_range(0.2, 0.4)
        directional.set_lifetime_range(3.0, 6.0)
        return directional

    if mode is PlacementMode.EXPLOSION_EMITTER:
        explosion = ExplosionEmitter(position)
        explosion.particle_count = 20
        explosion.set_speed_range(0.3, 0.7)
        explosion.set_lifetime_range(1.5, 2.5)
        return explosion

    if mode is PlacementMode.GRAVITY_WELL:
        well = GravityWell(position)
        well.strength = 0.1
        well.radius = 0.5
        return well

    if mode is PlacementMode.WIND:
        wind = Wind(Vec2(1.0, 0.0))
        wind.strength = 0.05
        wind.varying = True
        wind.position = position
        return wind

    raise ValueError(f"placement mode {mode!r} creates nothing")