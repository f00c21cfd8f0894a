# MIT License (see LICENSE)
"""
2D vector value type.

Arithmetic operators (+, -, *, /) always return a new Vector. The augmented
operators (+=, -=, *=, /=) and the named methods move(), set() and zero_out()
mutate the receiver in place. Call sites that hold a vector owned by a Node
must use clone() before handing it out, otherwise two nodes end up sharing
(and moving) the same instance.
"""
from __future__ import annotations

import math
from collections.abc import Iterator

import numpy as np


class Vector:
    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    @classmethod
    def zero(cls) -> Vector:
        return cls(0.0, 0.0)

    @classmethod
    def of(cls, value: Vector | tuple[float, float] | np.ndarray) -> Vector:
        """Build a fresh Vector from another Vector, a pair, or a (2,) array."""
        if isinstance(value, Vector):
            return value.clone()
        return cls(value[0], value[1])

    @classmethod
    def from_array(cls, a: np.ndarray) -> Vector:
        return cls(float(a[0]), float(a[1]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def clone(self) -> Vector:
        return Vector(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector({self.x!r}, {self.y!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # mutable

    # --- value-returning -------------------------------------------------

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector:
        return Vector(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Vector) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    # --- in-place --------------------------------------------------------

    def __iadd__(self, other: Vector) -> Vector:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector) -> Vector:
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: float) -> Vector:
        self.x *= scalar
        self.y *= scalar
        return self

    def __itruediv__(self, scalar: float) -> Vector:
        self.x /= scalar
        self.y /= scalar
        return self

    def move(self, delta: Vector) -> None:
        """Translate in place by delta."""
        self.x += delta.x
        self.y += delta.y

    def set(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def zero_out(self) -> None:
        self.x = 0.0
        self.y = 0.0
