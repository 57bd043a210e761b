"""A small mutable two-dimensional vector."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vector2D:
    """A point or displacement in world pixels."""

    x: float = 0.0
    y: float = 0.0

    def __iadd__(self, other: Vector2D) -> Vector2D:
        self.x += other.x
        self.y += other.y
        return self

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)