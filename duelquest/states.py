"""The game's screens: the main menu, the overworld and the duel."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

import pygame

from .collision import find_npc_collision
from .game_object import GameObject
from .level import Level
from .level_parser import parse_level
from .player import Player
from .state_machine import GameState
from .state_parser import parse_state

if TYPE_CHECKING:
    from .game import Game

logger = logging.getLogger(__name__)

# Frames between touching an NPC and the duel starting.
DUEL_START_DELAY = 120


class MainMenuState(GameState):
    """The title screen; Return starts the game."""

    state_id: ClassVar[str] = "MAINMENU"

    def __init__(self, game: Game) -> None:
        super().__init__()
        self.game = game
        self.game_objects: list[GameObject] = []

    def load(self) -> None:
        logger.info("entering %s", self.state_id)
        self.game_objects, self.texture_ids = parse_state(
            self.game.state_file, self.state_id, self.game.context, self.game.factory
        )
        self.loading_complete = True

    def update(self) -> None:
        if not self.loading_complete:
            return
        for game_object in self.game_objects:
            game_object.update()
        if self.game.context.input.is_key_down(pygame.K_RETURN):
            self.game.state_machine.change_state(PlayState(self.game))

    def render(self) -> None:
        if self.loading_complete:
            for game_object in self.game_objects:
                game_object.render()

    def clean(self) -> None:
        logger.info("exiting %s", self.state_id)
        self.game_objects.clear()


class PlayState(GameState):
    """The overworld: the player walks the map until meeting an NPC."""

    state_id: ClassVar[str] = "PLAY"

    def __init__(self, game: Game) -> None:
        super().__init__()
        self.game = game
        self.game_objects: list[GameObject] = []
        self.level: Level | None = None
        self.player: Player | None = None
        self.duel_triggered = False
        self.duel_start_timer = 0  # frames since the duel was triggered

    def load(self) -> None:
        logger.info("entering %s", self.state_id)
        context, factory = self.game.context, self.game.factory
        self.game_objects, self.texture_ids = parse_state(
            self.game.state_file, self.state_id, context, factory
        )
        level_file = self.game.level_files[self.game.current_level - 1]
        self.level = parse_level(level_file, context, factory)
        for game_object in self.game_objects:
            if isinstance(game_object, Player):
                game_object.level = self.level
                self.player = game_object
        self.loading_complete = True

    def update(self) -> None:
        if self.duel_triggered:
            self.duel_start_timer += 1
            if self.duel_start_timer > DUEL_START_DELAY:
                self.game.state_machine.change_state(DuelState(self.game))
            return
        if not self.loading_complete or self.level is None:
            return
        for game_object in self.game_objects:
            game_object.update()
        self.level.update()
        object_layer = self.level.object_layer()
        if self.player is None or object_layer is None:
            return
        if find_npc_collision(self.player, object_layer.game_objects) is not None:
            self.duel_triggered = True
            self.duel_start_timer = 0

    def render(self) -> None:
        if not self.loading_complete or self.level is None:
            return
        self.level.render()
        for game_object in self.game_objects:
            game_object.render()

    def clean(self) -> None:
        logger.info("exiting %s", self.state_id)
        self.game_objects.clear()
        self.level = None
        self.player = None


class DuelState(GameState):
    """The duel screen."""

    state_id: ClassVar[str] = "DUEL"

    def __init__(self, game: Game) -> None:
        super().__init__()
        self.game = game

    def load(self) -> None:
        """A duel has nothing to prepare yet."""

    def update(self) -> None:
        """A duel has nothing to advance yet."""

    def render(self) -> None:
        logger.info("rendering %s", self.state_id)

    def clean(self) -> None:
        """A duel holds nothing to release."""