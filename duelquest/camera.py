"""A camera that follows a target or sits at a fixed position."""

from __future__ import annotations

from .vector2d import Vector2D


class Camera:
    """Top-left corner of the visible part of the map.

    When a target is set, the camera centres on it; otherwise it uses its own
    position. Neither coordinate ever goes below zero.
    """

    def __init__(self, screen_width: int, screen_height: int) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.target: Vector2D | None = None
        self._position = Vector2D()

    @property
    def position(self) -> Vector2D:
        if self.target is not None:
            return Vector2D(
                max(self.target.x - self.screen_width // 2, 0.0),
                max(self.target.y - self.screen_height // 2, 0.0),
            )
        return Vector2D(self._position.x, self._position.y)

    @position.setter
    def position(self, value: Vector2D) -> None:
        self._position = Vector2D(value.x, value.y)

    def update(self, velocity: Vector2D) -> None:
        """Move the free camera position by a velocity, clamped at zero."""
        self._position += velocity
        self._position.x = max(self._position.x, 0.0)
        self._position.y = max(self._position.y, 0.0)