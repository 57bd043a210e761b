"""The game window, its main loop and the command that starts it."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

import pygame

from .factory import GameObjectFactory, UnknownObjectTypeError
from .game_object import Background, GameContext, MenuButton, Npc
from .level_parser import LevelParseError
from .player import Player
from .state_machine import GameStateMachine
from .state_parser import StateParseError
from .states import MainMenuState
from .texture_manager import TextureLoadError

logger = logging.getLogger(__name__)

FPS = 60
DEFAULT_TITLE = "Yu-Gi-Oh! SDL2"
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720


class Game:
    """Owns the window, the shared context and the state machine.

    The game starts in the main menu, which is loaded on construction.
    """

    def __init__(
        self,
        title: str = DEFAULT_TITLE,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        fullscreen: bool = False,
        assets_dir: str | os.PathLike[str] = "assets",
    ) -> None:
        pygame.init()
        pygame.display.set_caption(title)
        flags = pygame.FULLSCREEN if fullscreen else 0
        screen = pygame.display.set_mode((width, height), flags)
        logger.info("window created: %dx%d", width, height)

        self.context = GameContext(width, height, screen=screen)
        self.factory = GameObjectFactory()
        for kind in (MenuButton, Player, Background, Npc):
            self.factory.register(kind.type_name, kind)

        self.assets_dir = Path(assets_dir)
        self.state_file = self.assets_dir / "game.xml"
        self.level_files = [self.assets_dir / "level1.tmx"]
        self.current_level = 1

        self.state_machine = GameStateMachine()
        self.state_machine.change_state(MainMenuState(self))
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    def quit(self) -> None:
        """Ask the main loop to stop after the current frame."""
        self._running = False

    def handle_events(self) -> None:
        if self.context.input.update():
            self.quit()

    def update(self) -> None:
        self.state_machine.update()

    def render(self) -> None:
        self.context.screen.fill((0, 0, 0))
        self.state_machine.render()
        pygame.display.flip()

    def run(self) -> None:
        """Run frames at a fixed rate until the game quits."""
        clock = pygame.time.Clock()
        while self._running:
            self.handle_events()
            self.update()
            self.render()
            clock.tick(FPS)

    def clean(self) -> None:
        """Release the states, the window, textures and creators."""
        self.state_machine.clean()
        pygame.quit()
        self.context.textures.clean()
        self.factory.clean()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="duelquest", description="Walk the map and duel.")
    parser.add_argument("--assets", default="assets", help="directory holding game.xml and levels")
    parser.add_argument("--fullscreen", action="store_true", help="run in fullscreen")
    args = parser.parse_args(argv)

    try:
        game = Game(DEFAULT_TITLE, DEFAULT_WIDTH, DEFAULT_HEIGHT, args.fullscreen, args.assets)
    except (
        pygame.error,
        StateParseError,
        LevelParseError,
        TextureLoadError,
        UnknownObjectTypeError,
    ) as exc:
        print(f"game init failure - {exc}")
        pygame.quit()
        return -1

    print("game init success!")
    game.run()
    print("game closing...")
    game.clean()
    return 0


if __name__ == "__main__":
    sys.exit(main())