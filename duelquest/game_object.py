"""Game objects and the shared context they draw through."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

import pygame

from .camera import Camera
from .input_handler import InputHandler
from .texture_manager import TextureManager
from .vector2d import Vector2D


@dataclass(frozen=True)
class LoaderParams:
    """Everything needed to place and draw a newly created object."""

    x: int
    y: int
    width: int
    height: int
    texture_id: str
    num_frames: int
    anim_speed: int = 0


@dataclass
class GameContext:
    """Screen size, textures, input, camera and the surface to draw on."""

    width: int
    height: int
    textures: TextureManager = field(default_factory=TextureManager)
    input: InputHandler = field(default_factory=InputHandler)
    camera: Camera | None = None
    screen: pygame.Surface | None = None

    def __post_init__(self) -> None:
        if self.camera is None:
            self.camera = Camera(self.width, self.height)
        if self.screen is None:
            self.screen = pygame.Surface((self.width, self.height))


class GameObject:
    """Something with a position, a size and an animated texture."""

    type_name: ClassVar[str] = "GameObject"

    def __init__(self, context: GameContext) -> None:
        self.context = context
        self.position = Vector2D()
        self.velocity = Vector2D()
        self.acceleration = Vector2D()
        self.width = 0
        self.height = 0
        self.current_row = 0
        self.current_frame = 0
        self.num_frames = 0
        self.flipped = False
        self.updating = False  # whether the object is within the screen
        self.angle = 0.0
        self.alpha = 255
        self.texture_id = ""
        self.params: LoaderParams | None = None

    def load(self, params: LoaderParams) -> None:
        """Take position, size and texture from ``params``."""
        self.params = params
        # Mutate in place: the camera may hold this vector as its target.
        self.position.x = params.x
        self.position.y = params.y
        self.width = params.width
        self.height = params.height
        self.texture_id = params.texture_id
        self.num_frames = params.num_frames

    def update(self) -> None:
        """Advance one frame; a plain object does not change."""

    def render(self) -> None:
        """Draw the current frame at the object's position."""
        self.context.textures.draw_frame(
            self.texture_id,
            int(self.position.x),
            int(self.position.y),
            self.width,
            self.height,
            self.current_row,
            self.current_frame,
            self.context.screen,
            self.angle,
            self.alpha,
            self.flipped,
        )


class Background(GameObject):
    """A still image drawn in screen coordinates."""

    type_name: ClassVar[str] = "Background"

    def render(self) -> None:
        self.context.textures.draw(
            self.texture_id,
            int(self.position.x),
            int(self.position.y),
            self.width,
            self.height,
            self.context.screen,
        )


class ButtonState(IntEnum):
    NOT_CHOSEN = 0
    CHOSEN = 1


class MenuButton(GameObject):
    """A menu entry whose frame shows whether it is chosen."""

    type_name: ClassVar[str] = "MenuButton"

    def load(self, params: LoaderParams) -> None:
        self.position.x = params.x
        self.position.y = params.y
        self.width = params.width
        self.height = params.height
        self.texture_id = params.texture_id
        self.num_frames = params.num_frames
        self.current_frame = ButtonState.NOT_CHOSEN

    def render(self) -> None:
        self.context.textures.draw_frame(
            self.texture_id,
            int(self.position.x),
            int(self.position.y),
            self.width,
            self.height,
            self.current_row,
            self.current_frame,
            self.context.screen,
            self.angle,
            self.alpha,
        )


class Npc(GameObject):
    """A character placed on the map, drawn relative to the camera."""

    type_name: ClassVar[str] = "Npc"

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
        )