"""Tile maps: tilesets, tile layers, object layers and the level holding them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .game_object import GameContext, GameObject

logger = logging.getLogger(__name__)


@dataclass
class Tileset:
    """One tileset image and how its tiles are laid out."""

    first_gid: int = 0
    tile_width: int = 0
    tile_height: int = 0
    spacing: int = 0
    margin: int = 0
    width: int = 0  # of the whole image, in pixels
    height: int = 0  # of the whole image, in pixels
    num_columns: int = 0
    name: str = ""


class Layer(ABC):
    """A drawable slice of a level."""

    @abstractmethod
    def update(self) -> None:
        """Advance the layer by one frame."""

    @abstractmethod
    def render(self) -> None:
        """Draw the layer."""


class TileLayer(Layer):
    """A grid of tile IDs drawn from one or more tilesets.

    A tile ID of 0 means an empty cell.
    """

    def __init__(
        self,
        tile_size: int,
        map_width: int,
        map_height: int,
        tilesets: list[Tileset],
        context: GameContext,
    ) -> None:
        self.tile_size = tile_size
        self.map_width = map_width  # in cells
        self.map_height = map_height  # in cells
        self.tilesets = tilesets
        self.context = context
        self.tile_ids: list[list[int]] = []

    def update(self) -> None:
        """Tile layers do not move; the camera scrolls instead."""

    def render(self) -> None:
        """Draw every non-empty tile that lies within the camera's view."""
        size = self.tile_size
        cam = self.context.camera.position
        for i, row in enumerate(self.tile_ids):
            for j, tile_id in enumerate(row):
                if tile_id == 0:
                    continue
                x = int(j * size - cam.x)
                if x < -size or x > self.context.width:
                    continue
                y = int(i * size - cam.y)
                if y < -size or y > self.context.height:
                    continue
                tileset = self.tileset_for(tile_id)
                tile_row, tile_column = divmod(
                    tile_id - tileset.first_gid, tileset.num_columns
                )
                self.context.textures.draw_tile(
                    tileset.name,
                    tileset.margin,
                    tileset.spacing,
                    x,
                    y,
                    size,
                    size,
                    tile_row,
                    tile_column,
                    self.context.screen,
                )

    def tileset_for(self, tile_id: int) -> Tileset:
        """Return the tileset a tile ID belongs to.

        Each tileset but the last covers IDs up to the next one's first ID;
        the last tileset takes any ID not claimed before it.
        """
        for current, following in zip(self.tilesets, self.tilesets[1:]):
            if current.first_gid <= tile_id < following.first_gid:
                return current
        if not self.tilesets:
            raise LookupError(f"no tileset for tile id {tile_id}")
        return self.tilesets[-1]


class ObjectLayer(Layer):
    """A layer of game objects placed on the map."""

    def __init__(self, context: GameContext) -> None:
        self.context = context
        self.game_objects: list[GameObject] = []

    def update(self) -> None:
        """Mark which objects are within reach of the screen."""
        cam = self.context.camera.position
        limit = cam.x + self.context.width
        for game_object in self.game_objects:
            game_object.updating = game_object.position.x <= limit

    def render(self) -> None:
        for game_object in self.game_objects:
            game_object.render()


class Level:
    """All layers and tilesets of one map.

    ``collision_layers`` holds the tile layers marked collidable; each of them
    is also in ``layers``.
    """

    def __init__(self) -> None:
        self.layers: list[Layer] = []
        self.tilesets: list[Tileset] = []
        self.collision_layers: list[TileLayer] = []

    def update(self) -> None:
        for layer in self.layers:
            layer.update()

    def render(self) -> None:
        for layer in self.layers:
            layer.render()

    def object_layer(self) -> ObjectLayer | None:
        """Return the first object layer, or None if there is none."""
        return next(
            (layer for layer in self.layers if isinstance(layer, ObjectLayer)), None
        )