import math

import pytest

from partisim.demo import ParticleDemo
from partisim.effects import GravityWell, Wind
from partisim.emitters import ExplosionEmitter, UniformEmitter
from partisim.particle import Particle
from partisim.scene import (
    EMITTER_COLOR,
    SELECTED_COLOR,
    SELECTED_MARKER_SIZE,
    PlacementMode,
    SelectedType,
)
from partisim.vector import Vec2, length


def _place(demo, mode, position):
    demo.set_placement_mode(mode)
    demo.handle_mouse_click(position)


def test_new_demo_is_empty():
    demo = ParticleDemo()
    demo.update(0.0, 0.1, Vec2())
    assert demo.positions == []
    assert len(demo.markers) == 0
    assert demo.selection.kind is SelectedType.NONE


def test_placing_emitter_selects_it_and_resets_mode():
    demo = ParticleDemo()
    _place(demo, PlacementMode.UNIFORM_EMITTER, Vec2(0.5, 0.5))
    assert len(demo.emitters) == 1
    assert isinstance(demo.emitters[0], UniformEmitter)
    assert demo.emitters[0].position == Vec2(0.5, 0.5)
    assert demo.system.emitters == demo.emitters
    assert demo.placement_mode is PlacementMode.NONE
    assert demo.selection.kind is SelectedType.EMITTER
    assert demo.selection.index == 0


def test_placing_effect_selects_it():
    demo = ParticleDemo()
    _place(demo, PlacementMode.GRAVITY_WELL, Vec2(-0.3, 0.2))
    assert isinstance(demo.effects[0], GravityWell)
    assert demo.system.effects == demo.effects
    assert demo.selection.kind is SelectedType.EFFECT
    assert demo.selected_object is demo.effects[0]


def test_markers_show_selection():
    demo = ParticleDemo()
    _place(demo, PlacementMode.UNIFORM_EMITTER, Vec2(0.5, 0.5))
    _place(demo, PlacementMode.UNIFORM_EMITTER, Vec2(-0.5, -0.5))
    demo.update(0.0, 0.0, Vec2())
    assert demo.markers.positions == [Vec2(0.5, 0.5), Vec2(-0.5, -0.5)]
    assert demo.markers.colors == [EMITTER_COLOR, SELECTED_COLOR]
    assert demo.markers.sizes[1] == SELECTED_MARKER_SIZE


def test_click_selects_nearby_object_and_clears_when_far():
    demo = ParticleDemo()
    _place(demo, PlacementMode.UNIFORM_EMITTER, Vec2(0.5, 0.5))
    _place(demo, PlacementMode.WIND, Vec2(-0.5, 0.0))
    demo.handle_mouse_click(Vec2(0.52, 0.5))
    assert demo.selection.kind is SelectedType.EMITTER
    assert demo.selected_object is demo.emitters[0]
    demo.handle_mouse_click(Vec2(-0.49, 0.0))
    assert demo.selected_object is demo.effects[0]
    demo.handle_mouse_click(Vec2(0.0, -0.9))
    assert demo.selection.kind is SelectedType.NONE
    assert demo.selected_object is None


def test_set_placement_mode_clears_selection():
    demo = ParticleDemo()
    _place(demo, PlacementMode.UNIFORM_EMITTER, Vec2(0.0, 0.0))
    demo.set_placement_mode(PlacementMode.WIND)
    assert demo.placement_mode is PlacementMode.WIND
    assert demo.selection.kind is SelectedType.NONE


def test_cancel_placement_prevents_creation():
    demo = ParticleDemo()
    demo.set_placement_mode(PlacementMode.EXPLOSION_EMITTER)
    demo.cancel_placement()
    demo.handle_mouse_click(Vec2(0.1, 0.1))
    assert demo.placement_mode is PlacementMode.NONE
    assert demo.emitters == ()


def test_delete_selected_removes_from_scene_and_system():
    demo = ParticleDemo()
    _place(demo, PlacementMode.UNIFORM_EMITTER, Vec2(0.0, 0.0))
    emitter = demo.emitters[0]
    assert demo.delete_selected() is emitter
    assert demo.emitters == ()
    assert demo.system.emitters == ()
    assert demo.selection.kind is SelectedType.NONE
    assert demo.delete_selected() is None


def test_delete_selected_effect():
    demo = ParticleDemo()
    _place(demo, PlacementMode.WIND, Vec2(0.3, 0.3))
    wind = demo.effects[0]
    assert demo.delete_selected() is wind
    assert demo.system.effects == ()


def test_keep_within_bounds_clamps_and_bounces():
    demo = ParticleDemo()
    outside = Particle(
        position=Vec2(1.5, -2.0), velocity=Vec2(2.0, -1.0), lifetime=1.0, alive=True
    )
    inward = Particle(
        position=Vec2(-1.5, 0.0), velocity=Vec2(3.0, 0.0), lifetime=1.0, alive=True
    )
    dead = Particle(position=Vec2(5.0, 5.0), velocity=Vec2(1.0, 1.0))
    demo.system.particles = [outside, inward, dead]
    demo.keep_within_bounds()
    first, second, third = demo.system.particles
    assert first.position == Vec2(1.0, -1.0)
    assert first.velocity.x == pytest.approx(-2.0 * demo.boundary_restitution)
    assert first.velocity.y == pytest.approx(1.0 * demo.boundary_restitution)
    assert second.position == Vec2(-1.0, 0.0)
    assert second.velocity == Vec2(3.0, 0.0)
    assert third.position == Vec2(5.0, 5.0)


def test_explosion_fires_on_update_and_stays_in_bounds():
    demo = ParticleDemo()
    _place(demo, PlacementMode.EXPLOSION_EMITTER, Vec2(0.95, 0.95))
    explosion = demo.emitters[0]
    assert isinstance(explosion, ExplosionEmitter)
    demo.update(0.0, 0.01, Vec2())
    assert len(demo.positions) == explosion.particle_count
    assert len(demo.colors) == len(demo.sizes) == len(demo.positions)
    for _ in range(20):
        demo.update(0.0, 0.05, Vec2())
    assert all(-1.0 <= p.x <= 1.0 and -1.0 <= p.y <= 1.0 for p in demo.positions)


def test_update_moves_varying_wind():
    demo = ParticleDemo()
    _place(demo, PlacementMode.WIND, Vec2(0.0, 0.0))
    wind = demo.effects[0]
    assert isinstance(wind, Wind)
    demo.update(math.pi, 0.01, Vec2())
    assert length(wind.current_direction) == pytest.approx(1.0)
    assert wind.current_direction.y > 0.0
    assert wind.direction == Vec2(1.0, 0.0)


def test_uniform_emitter_produces_particles():
    demo = ParticleDemo()
    _place(demo, PlacementMode.UNIFORM_EMITTER, Vec2(0.0, 0.0))
    for step in range(10):
        demo.update(step * 0.1, 0.1, Vec2())
    assert len(demo.positions) > 0
    assert all(0.0 < color[3] <= 1.0 for color in demo.colors)