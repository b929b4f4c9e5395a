# partisim

`partisim` is a small two-dimensional particle system in plain Python. It has
no dependencies outside the standard library.

A simulation is made of three kinds of things:

- **Particles** (`partisim.particle.Particle`): points with a position,
  velocity, accumulated force and remaining lifetime. `update(dt)` moves them
  by forward Euler integration and marks them dead once their lifetime runs
  out.
- **Emitters** (`partisim.emitters`): objects that create particles, reviving
  dead particles before adding new ones.
  - `UniformEmitter` emits in all directions at `rate` particles per second.
  - `DirectionalEmitter` emits along `direction`, deviating by up to `spread`
    radians either way.
  - `ExplosionEmitter` releases `particle_count` particles at once after
    `trigger()` is called.

  Rate-driven emitters stop adding new particles once a list holds 10,000
  (`partisim.emitter.PARTICLE_LIMIT`); explosions are not capped. Every
  emitter takes an optional `rng=random.Random(...)` keyword for reproducible
  runs.
- **Effects** (`partisim.effects`): objects that push particles around.
  `GravityWell` pulls particles towards a point with constant strength inside
  its `radius` and an inverse-square fall-off beyond it, ignoring particles
  closer than 0.1. `Wind` pushes every particle along a direction, which sways
  over time when `varying` is set and `update(time)` is called. Any effect can
  be switched off with `enabled` and scaled with `strength`.

`partisim.system.ParticleSystem` ties these together. Each `update(dt)` runs
the emitters, resets forces, applies the enabled effects to living particles,
advances every particle and drops the dead ones.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from partisim.vector import Vec2
from partisim.system import ParticleSystem
from partisim.emitters import UniformEmitter, ExplosionEmitter
from partisim.effects import GravityWell, Wind

system = ParticleSystem()

fountain = UniformEmitter(Vec2(0.0, 0.0))
fountain.set_speed_range(0.1, 0.3)
fountain.set_lifetime_range(3.0, 5.0)
system.add_emitter(fountain)

burst = ExplosionEmitter(Vec2(0.5, 0.5))
burst.set_speed_range(0.3, 0.7)
burst.set_lifetime_range(1.5, 2.5)
burst.trigger()
system.add_emitter(burst)

system.add_effect(GravityWell(Vec2(-0.5, 0.0)))
system.add_effect(Wind(Vec2(1.0, 0.0)))

for _ in range(120):
    system.update(1 / 60)

positions, colors, sizes = system.particle_data()
```

`particle_data()` returns the positions, colours and sizes of the living
particles. Colours are white with an alpha that fades, and sizes shrink, over
the last two seconds of a particle's life.

`ParticleSystem` also offers `remove_emitter`, `remove_effect`,
`clear_particles`, `clear_emitters` and `clear_effects`, and exposes its
`particles`, `emitters` and `effects` as tuples; `particles` can be assigned
to replace the particle list.

The vector helpers in `partisim.vector` (`rotate`, `length`, `normalize`,
`dot` and `clamp`) work on the immutable `Vec2` type used throughout the
package.

### A random reference system

`partisim.randomsystem.RandomSystem(num_particles, seed=...)` holds particles
with random positions in [-1, 1], sizes in [1, 10], colours with an alpha of
0.5 and lifetimes in [0.5, 2.5]. It is seeded with a fixed value unless
another seed (or `None`) is given. Each `update(time, speed)` drifts the
particles with a shared rocking motion plus random jitter, fades them near the
end of their life and replaces each expired particle with a new random one.
`positions`, `sizes` and `colors` give the current state, and `copy()` returns
an independent copy, random generator state included.

### The interactive scene

`partisim.demo.ParticleDemo` models an editor around a `ParticleSystem` in
the square from -1 to 1 on both axes:

- `set_placement_mode(mode)` takes a `partisim.scene.PlacementMode` and clears
  the selection; the next `handle_mouse_click(position)` places an emitter or
  effect of that kind there and selects it. Outside placement mode a click
  selects the nearest emitter or effect within 0.1, with emitters winning
  ties. `cancel_placement()` leaves placement mode.
- `selected_object` is the selected emitter or effect, and
  `delete_selected()` removes it from the scene and returns it.
- `update(time, dt, mouse_pos)` triggers every explosion emitter, lets
  varying winds follow `time`, advances the system, and refreshes
  `positions`, `colors`, `sizes` and `markers`. The mouse position plays no
  part in it.
- While `use_boundaries` is on, `keep_within_bounds()` clamps living
  particles to the square and reflects outward velocities, scaled by
  `boundary_restitution` (0.8 by default).

The helpers in `partisim.scene` are the building blocks of the scene:
`create_object(mode, position)` builds a configured emitter or effect (and
raises `ValueError` for `PlacementMode.NONE`), `pick_object` returns a
`Selection`, `effect_position` says where an effect sits, and `build_markers`
produces `Markers` showing where the emitters and effects are and which one is
selected.

## What it does not do

`partisim` contains no drawing, windowing or user-interface code and no
command-line program. `ParticleDemo` and `Markers` provide the data a front
end would draw and the operations its controls would call, but opening a
window, rendering points and reading the mouse are left to the caller.