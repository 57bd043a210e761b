"""The player character: keyboard-driven movement over a tile map."""

from __future__ import annotations

import math
from enum import Enum
from typing import ClassVar

import pygame

from .game_object import GameContext, GameObject, LoaderParams
from .level import Level, TileLayer
from .vector2d import Vector2D


class Direction(Enum):
    """Where the player is heading, as a unit step."""

    NONE = (0, 0)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)


def _cell(pixel: int, tile_size: int) -> int:
    """Cell index of a pixel, truncating toward zero."""
    return int(pixel / tile_size)


class Player(GameObject):
    """Moves one step per frame in the direction of the held arrow key.

    Movement is blocked by non-empty cells of the level's first collision
    layer and by the edges of the map.
    """

    type_name: ClassVar[str] = "Player"

    def __init__(self, context: GameContext) -> None:
        super().__init__(context)
        self.speed = 4
        self.direction = Direction.NONE
        self.level: Level | None = None

    def load(self, params: LoaderParams) -> None:
        super().load(params)
        self.context.camera.target = self.position

    def _collision_layer(self) -> TileLayer:
        if self.level is None or not self.level.collision_layers:
            raise RuntimeError("the player needs a level with a collision layer")
        return self.level.collision_layers[0]

    def handle_input(self) -> None:
        """Choose a direction from the held keys, refusing to leave the map."""
        layer = self._collision_layer()
        size = layer.tile_size
        keys = self.context.input
        pos = self.position
        if keys.is_key_down(pygame.K_RIGHT) and pos.x < size * layer.map_width - self.width:
            self.direction = Direction.RIGHT
        elif keys.is_key_down(pygame.K_LEFT) and pos.x > 0:
            self.direction = Direction.LEFT
        elif keys.is_key_down(pygame.K_UP) and pos.y > 0:
            self.direction = Direction.UP
        elif (
            keys.is_key_down(pygame.K_DOWN)
            and pos.y < size * layer.map_height - self.height
        ):
            self.direction = Direction.DOWN
        else:
            self.direction = Direction.NONE

    def update(self) -> None:
        self.handle_input()
        dx, dy = self.direction.value
        self.velocity.x = dx * self.speed
        self.velocity.y = dy * self.speed
        self.handle_movement(Vector2D(self.velocity.x, self.velocity.y))

    def handle_movement(self, velocity: Vector2D) -> None:
        """Move along x, then along y, skipping any axis that would collide."""
        step_x, step_y = velocity.x, velocity.y

        moved = Vector2D(self.position.x + step_x, self.position.y)
        if self.collides_with_tiles(moved):
            self.velocity.x = 0
        else:
            self.position.x = moved.x

        moved = Vector2D(self.position.x, self.position.y + step_y)
        if self.collides_with_tiles(moved):
            self.velocity.y = 0
        else:
            self.position.y = moved.y

    def collides_with_tiles(self, new_pos: Vector2D) -> bool:
        """Whether the player's box at ``new_pos``, shrunk by one pixel on
        each side, touches a non-empty tile. Cells outside the map block."""
        layer = self._collision_layer()
        tiles = layer.tile_ids
        size = layer.tile_size

        first_x = int(new_pos.x + 1)
        stop_x = math.ceil(new_pos.x + self.width - 1)
        first_y = int(new_pos.y + 1)
        stop_y = math.ceil(new_pos.y + self.height - 1)
        if first_x >= stop_x or first_y >= stop_y:
            return False

        columns = range(_cell(first_x, size), _cell(stop_x - 1, size) + 1)
        rows = range(_cell(first_y, size), _cell(stop_y - 1, size) + 1)
        for row in rows:
            if not 0 <= row < len(tiles):
                return True
            cells = tiles[row]
            for column in columns:
                if not 0 <= column < len(cells) or cells[column] != 0:
                    return True
        return False

    def render(self) -> None:
        cam = self.context.camera.position
        self.context.textures.draw_frame(
            self.texture_id,
            int(int(self.position.x) - cam.x),
            int(int(self.position.y) - cam.y),
            self.width,
            self.height,
            self.current_row,
            self.current_frame,
            self.context.screen,
            self.angle,
            self.alpha,
            self.flipped,
        )