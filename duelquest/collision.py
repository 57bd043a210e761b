"""Collision checks between the player and other game objects."""

from __future__ import annotations

from collections.abc import Iterable

import pygame

from .game_object import GameObject


def _rect(game_object: GameObject) -> pygame.Rect:
    return pygame.Rect(
        int(game_object.position.x),
        int(game_object.position.y),
        game_object.width,
        game_object.height,
    )


def find_npc_collision(
    player: GameObject, objects: Iterable[GameObject]
) -> GameObject | None:
    """Return the first on-screen NPC whose box overlaps the player's."""
    player_rect = _rect(player)
    for game_object in objects:
        if game_object.type_name != "Npc" or not game_object.updating:
            continue
        if player_rect.colliderect(_rect(game_object)):
            return game_object
    return None