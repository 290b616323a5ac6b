"""A rectangular area holding colliding balls."""

from __future__ import annotations

import random

from simplecollision import config
from simplecollision.ball import Ball, Vec


class Simulation:
    """Balls in a width x height area, advanced one step at a time."""

    def __init__(
        self,
        width: float = config.WINDOW_SIZE[0],
        height: float = config.WINDOW_SIZE[1],
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.balls: list[Ball] = []
        self._rng = rng if rng is not None else random.Random()

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def generate_random(self, n: int) -> None:
        """Add n balls at random positions with random velocities in [-1, 1]."""
        radius = config.BALL_RADIUS
        span_x = int(self.width - 2 * radius)
        span_y = int(self.height - 2 * radius)
        if span_x <= 0 or span_y <= 0:
            raise ValueError(
                f"area {self.width}x{self.height} is too small for balls of radius {radius}"
            )
        for _ in range(n):
            position = Vec(
                self._rng.randrange(span_x) + radius,
                self._rng.randrange(span_y) + radius,
            )
            velocity = Vec(self._rng.uniform(-1.0, 1.0), self._rng.uniform(-1.0, 1.0))
            self.balls.append(Ball(position, velocity))

    def clear(self) -> None:
        self.balls.clear()

    def total_energy(self) -> float:
        """Total kinetic energy, taking every ball's mass as one."""
        return sum(ball.kinetic_energy() for ball in self.balls)

    def energy_text(self) -> str:
        return f"Total kinetic energy: {self.total_energy():.{config.ENERGY_PRECISION}f}"

    def step(self) -> None:
        """Resolve collisions and move every ball once."""
        for ball in self.balls:
            for other in self.balls:
                if other is not ball:
                    ball.check_object_collision(other)
            ball.check_border_collision(self.width, self.height)
            ball.move()