"""Balls moving in a plane, with border and ball-to-ball collisions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from simplecollision import config


@dataclass(frozen=True)
class Vec:
    """A two-dimensional vector or point."""

    x: float
    y: float

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec:
        return Vec(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y)

    def dot(self, other: Vec) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def rounded(self) -> Vec:
        """Nearest integer point, halves rounded away from zero."""
        return Vec(_round_half_away(self.x), _round_half_away(self.y))


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def rotate(point: Vec, phi: float) -> Vec:
    """Rotate a point about the origin by phi radians, truncating to integers."""
    cos_phi, sin_phi = math.cos(phi), math.sin(phi)
    xp = cos_phi * point.x - sin_phi * point.y
    yp = sin_phi * point.x + cos_phi * point.y
    return Vec(int(xp), int(yp))


_ARROW_HEAD = (Vec(-4, -3), Vec(4, 0), Vec(-4, 3))


@dataclass(frozen=True)
class Arrow:
    """A velocity arrow: a shaft from start to end and a triangular head."""

    start: Vec
    end: Vec
    head: tuple[Vec, Vec, Vec]


@dataclass
class Ball:
    """A ball of unit mass with a position and a velocity."""

    position: Vec
    velocity: Vec
    radius: float = config.BALL_RADIUS
    colour: tuple[int, int, int] = field(default=config.BALL_COLOUR)

    def speed(self) -> float:
        return self.velocity.length()

    def kinetic_energy(self) -> float:
        return self.velocity.dot(self.velocity) / 2

    def move(self) -> None:
        """Advance the ball by one time step."""
        speed = self.speed()
        if not speed:
            return
        vx, vy = self.velocity.x, self.velocity.y
        total = abs(vx) + abs(vy)
        x_part = vx / total * speed
        y_part = vy / total * speed
        self.position = Vec(
            self.position.x + x_part * config.TIME_STEP_MILLIS,
            self.position.y + y_part * config.TIME_STEP_MILLIS,
        )

    def check_border_collision(self, width: float, height: float) -> None:
        """Bounce off the edges of a width x height area."""
        x, y = self.position.x, self.position.y
        vx, vy = self.velocity.x, self.velocity.y
        r = self.radius

        if vx > 0 and x + r > width:
            x, vx = width - r - 1.0, -vx
        elif vx < 0 and x - r < 0:
            x, vx = r + 1.0, -vx

        if vy > 0 and y + r > height:
            y, vy = height - r - 1.0, -vy
        elif vy < 0 and y - r < 0:
            y, vy = r + 1.0, -vy

        self.position = Vec(x, y)
        self.velocity = Vec(vx, vy)

    def check_object_collision(self, other: Ball) -> None:
        """Resolve an overlap with another ball of equal mass."""
        radius_sum = self.radius + other.radius
        offset = self.position - other.position
        distance = offset.length()
        # Coincident centres give no direction to push along.
        if distance == 0 or distance >= radius_sum:
            return

        # Dynamic response, equal masses.
        rel_velocity = self.velocity - other.velocity
        scalar1 = rel_velocity.dot(offset)
        scalar2 = (-rel_velocity).dot(-offset)
        squared = distance * distance
        self.velocity = self.velocity - offset * (scalar1 / squared)
        other.velocity = other.velocity - (-offset) * (scalar2 / squared)

        # Static response: each update sees the positions already moved.
        d = 0.5 * (distance - radius_sum)
        sx = self.position.x - d * (self.position.x - other.position.x) / distance
        sy = self.position.y - d * (self.position.y - other.position.y) / distance
        self.position = Vec(sx, sy)
        ox = other.position.x + d * (sx - other.position.x) / distance
        oy = other.position.y + d * (sy - other.position.y) / distance
        other.position = Vec(ox, oy)

    def arrow(self) -> Arrow | None:
        """The velocity arrow in integer coordinates, or None when at rest."""
        speed = self.speed()
        if speed == 0:
            return None
        norm = self.velocity * (1 / speed)
        base = self.position + norm * self.radius
        end = (base + self.velocity * config.ARROW_LENGTH_SCALING).rounded()
        phi = math.atan2(self.velocity.y, self.velocity.x)
        head = tuple(rotate(p, phi) + end for p in _ARROW_HEAD)
        return Arrow(start=base.rounded(), end=end, head=head)