"""A simple self-contained system of randomly placed, rocking and respawning particles."""

from __future__ import annotations

import copy
import math
import random

from partisim.vector import Vec2

Color = tuple[float, float, float, float]

_DEFAULT_SEED = 5489
_INITIAL_ALPHA = 0.5


class RandomSystem:
    """``num_particles`` particles with random positions, sizes, colours and lifetimes.

    Positions lie in [-1, 1], sizes in [1, 10], colour channels in [0, 1] with an alpha
    of 0.5, and lifetimes in [0.5, 2.5]. The generator is seeded with a fixed value
    unless ``seed`` says otherwise.
    """

    def __init__(self, num_particles: int, seed: int | None = _DEFAULT_SEED) -> None:
        self._rng = random.Random(seed)
        self._prev_time = 0.0
        self._positions = [self._random_position() for _ in range(num_particles)]
        self._sizes = [self._random_size() for _ in range(num_particles)]
        self._colors = [self._random_color() for _ in range(num_particles)]
        self._lifetimes = [self._random_lifetime() for _ in range(num_particles)]

    @property
    def positions(self) -> tuple[Vec2, ...]:
        return tuple(self._positions)

    @property
    def sizes(self) -> tuple[float, ...]:
        return tuple(self._sizes)

    @property
    def colors(self) -> tuple[Color, ...]:
        return tuple(self._colors)

    def update(self, time: float, speed: float) -> None:
        """Advance to ``time``, scaling the elapsed time by ``speed``.

        Every particle drifts with a shared rocking motion plus its own jitter, fades as
        its lifetime runs out and is replaced by a new random particle once it expires.
        """
        dt = time - self._prev_time
        self._prev_time = time
        sim_dt = dt * speed
        rocking = Vec2(math.cos(time), -abs(math.sin(time))) * 0.2

        for i, (position, color, lifetime) in enumerate(
            zip(self._positions, self._colors, self._lifetimes)
        ):
            self._positions[i] = position + (rocking + self._random_position()) * sim_dt
            r, g, b, a = color
            self._colors[i] = (r, g, b, min(a, lifetime))
            remaining = lifetime - sim_dt
            self._lifetimes[i] = remaining
            if remaining < 0.0:
                self._positions[i] = self._random_position()
                self._colors[i] = self._random_color()
                self._sizes[i] = self._random_size()
                self._lifetimes[i] = self._random_lifetime()

    def copy(self) -> RandomSystem:
        """Return an independent copy, random generator state included."""
        return copy.deepcopy(self)

    def _random_position(self) -> Vec2:
        return Vec2(self._rng.uniform(-1.0, 1.0), self._rng.uniform(-1.0, 1.0))

    def _random_size(self) -> float:
        return self._rng.uniform(1.0, 10.0)

    def _random_color(self) -> Color:
        return (
            self._rng.uniform(0.0, 1.0),
            self._rng.uniform(0.0, 1.0),
            self._rng.uniform(0.0, 1.0),
            _INITIAL_ALPHA,
        )

    def _random_lifetime(self) -> float:
        return self._rng.uniform(0.5, 2.5)