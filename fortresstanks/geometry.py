"""Two-dimensional vector maths, character stats and screen constants."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

WIN_SIZE_X = 800
WIN_SIZE_Y = 600

MINIMAP_SIZE_X = 200
MINIMAP_SIZE_Y = 128

PI = 3.1415926

_NORMALIZE_EPSILON = 1e-11


@dataclass
class Vector:
    """A mutable 2D vector, also used as a screen position."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __iadd__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        return self

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> None:
        """Scale the vector to unit length in place; near-zero vectors are left alone."""
        length = self.length()
        if length < _NORMALIZE_EPSILON:
            return
        self.x /= length
        self.y /= length

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> float:
        return self.x * other.y - self.y * other.x


Pos = Vector


@dataclass
class Stat:
    """Hit points and movement speed of a game object."""

    hp: int = 0
    max_hp: int = 0
    speed: float = 0.0