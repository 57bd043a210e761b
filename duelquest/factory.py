"""Creation of game objects from their type names."""

from __future__ import annotations

from collections.abc import Callable

from .game_object import GameContext, GameObject

Creator = Callable[[GameContext], GameObject]


class UnknownObjectTypeError(LookupError):
    """No creator is registered for the requested type."""


class GameObjectFactory:
    """Maps type names to callables that build game objects."""

    def __init__(self) -> None:
        self._creators: dict[str, Creator] = {}

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._creators

    def register(self, type_id: str, creator: Creator) -> None:
        """Register ``creator`` for ``type_id``, replacing any earlier one."""
        self._creators[type_id] = creator

    def create(self, type_id: str, context: GameContext) -> GameObject:
        """Build a new object of the named type."""
        try:
            creator = self._creators[type_id]
        except KeyError:
            raise UnknownObjectTypeError(f"could not find type: {type_id}") from None
        return creator(context)

    def clean(self) -> None:
        """Forget every registered creator."""
        self._creators.clear()