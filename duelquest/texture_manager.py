"""Loading and drawing of named textures."""

from __future__ import annotations

import os

import pygame


class TextureLoadError(Exception):
    """An image file could not be loaded as a texture."""


def frame_rect(width: int, height: int, row: int, frame: int) -> pygame.Rect:
    """Source rectangle of an animation frame in an evenly spaced sheet."""
    return pygame.Rect(width * frame, height * row, width, height)


def tile_rect(
    margin: int, spacing: int, width: int, height: int, row: int, frame: int
) -> pygame.Rect:
    """Source rectangle of a tile in a tileset with margin and spacing."""
    return pygame.Rect(
        margin + (spacing + width) * frame,
        margin + (spacing + height) * row,
        width,
        height,
    )


class TextureManager:
    """Keeps surfaces by ID and draws whole images, frames and tiles.

    Drawing an ID that was never loaded draws nothing.
    """

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface] = {}

    def __contains__(self, texture_id: object) -> bool:
        return texture_id in self._textures

    def __len__(self) -> int:
        return len(self._textures)

    def get(self, texture_id: str) -> pygame.Surface | None:
        return self._textures.get(texture_id)

    def load(self, file_name: str | os.PathLike[str], texture_id: str) -> pygame.Surface:
        """Load an image file and store it under ``texture_id``."""
        try:
            surface = pygame.image.load(os.fspath(file_name))
        except (pygame.error, OSError) as exc:
            raise TextureLoadError(f"cannot load {os.fspath(file_name)}: {exc}") from exc
        if pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        self._textures[texture_id] = surface
        return surface

    def add(self, texture_id: str, surface: pygame.Surface) -> None:
        """Store an existing surface under ``texture_id``."""
        self._textures[texture_id] = surface

    @staticmethod
    def _cut(texture: pygame.Surface, area: pygame.Rect) -> pygame.Surface:
        piece = pygame.Surface(area.size, pygame.SRCALPHA)
        piece.blit(texture, (0, 0), area)
        return piece

    def draw(
        self,
        texture_id: str,
        x: int,
        y: int,
        width: int,
        height: int,
        target: pygame.Surface,
        flip: bool = False,
    ) -> None:
        """Draw the top-left ``width`` x ``height`` of a texture at (x, y)."""
        texture = self._textures.get(texture_id)
        if texture is None:
            return
        piece = self._cut(texture, pygame.Rect(0, 0, width, height))
        if flip:
            piece = pygame.transform.flip(piece, True, False)
        target.blit(piece, (x, y))

    def draw_frame(
        self,
        texture_id: str,
        x: int,
        y: int,
        width: int,
        height: int,
        row: int,
        frame: int,
        target: pygame.Surface,
        angle: float = 0.0,
        alpha: int = 255,
        flip: bool = False,
    ) -> None:
        """Draw one animation frame, rotated clockwise by ``angle`` degrees."""
        texture = self._textures.get(texture_id)
        if texture is None:
            return
        piece = self._cut(texture, frame_rect(width, height, row, frame))
        if flip:
            piece = pygame.transform.flip(piece, True, False)
        if angle:
            piece = pygame.transform.rotate(piece, -angle)
            dest = piece.get_rect(center=(x + width // 2, y + height // 2))
        else:
            dest = pygame.Rect(x, y, width, height)
        piece.set_alpha(alpha)
        target.blit(piece, dest.topleft)

    def draw_tile(
        self,
        texture_id: str,
        margin: int,
        spacing: int,
        x: int,
        y: int,
        width: int,
        height: int,
        row: int,
        frame: int,
        target: pygame.Surface,
    ) -> None:
        """Draw one tile of a tileset at (x, y)."""
        texture = self._textures.get(texture_id)
        if texture is None:
            return
        piece = self._cut(texture, tile_rect(margin, spacing, width, height, row, frame))
        target.blit(piece, (x, y))

    def discard(self, texture_id: str) -> None:
        """Forget one texture, if it is present."""
        self._textures.pop(texture_id, None)

    def clean(self) -> None:
        """Forget every texture."""
        self._textures.clear()