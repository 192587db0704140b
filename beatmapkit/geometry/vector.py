"""Two-dimensional float vector used for every playfield position."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, value: float) -> Vector2:
        """Vector with both components set to ``value``."""
        return cls(value, value)

    @classmethod
    def from_array(cls, arr: NDArray[np.float64]) -> Vector2:
        return cls(float(arr[0]), float(arr[1]))

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def multiply(self, other: Vector2) -> Vector2:
        return Vector2(self.x * other.x, self.y * other.y)

    def scale(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    def divide(self, divisor: float) -> Vector2:
        if divisor == 0:
            raise ZeroDivisionError("Division by 0")
        return Vector2(self.x / divisor, self.y / divisor)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other: Vector2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def angle_to(self, other: Vector2) -> float:
        return math.atan2(other.y - self.y, other.x - self.x)

    def normalized(self) -> Vector2:
        """Unit vector in the same direction.

        A zero vector yields NaN components rather than raising; callers that
        can produce one must guard upstream.
        """
        length = self.length
        with np.errstate(divide="ignore", invalid="ignore"):
            x = np.float64(self.x) / np.float64(length)
            y = np.float64(self.y) / np.float64(length)
        return Vector2(float(x), float(y))

    def equals(self, other: Vector2) -> bool:
        return self.x == other.x and self.y == other.y

    def __add__(self, other: Vector2) -> Vector2:
        return self.add(other)

    def __sub__(self, other: Vector2) -> Vector2:
        return self.subtract(other)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"
