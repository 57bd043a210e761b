"""Game states and the stack that runs them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class GameState(ABC):
    """One screen of the game: a menu, the overworld, a duel."""

    state_id: ClassVar[str] = ""

    def __init__(self) -> None:
        self.loading_complete = False  # set once load() has finished
        self.texture_ids: list[str] = []

    @abstractmethod
    def load(self) -> None:
        """Prepare the state when it becomes active."""

    @abstractmethod
    def update(self) -> None:
        """Advance the state by one frame."""

    @abstractmethod
    def render(self) -> None:
        """Draw the state."""

    @abstractmethod
    def clean(self) -> None:
        """Release what the state holds."""


class GameStateMachine:
    """A stack of states of which only the top one runs."""

    def __init__(self) -> None:
        self._states: list[GameState] = []

    @property
    def states(self) -> tuple[GameState, ...]:
        """The states from bottom to top."""
        return tuple(self._states)

    def update(self) -> None:
        if self._states:
            self._states[-1].update()

    def render(self) -> None:
        if self._states:
            self._states[-1].render()

    def clean(self) -> None:
        """Clean every state and empty the stack."""
        for state in self._states:
            state.clean()
        self._states.clear()

    def push_state(self, state: GameState) -> None:
        """Put ``state`` on top and load it."""
        self._states.append(state)
        state.load()

    def change_state(self, state: GameState) -> None:
        """Replace the top state with ``state``.

        Nothing happens if the top state already has the same ID.
        """
        if self._states:
            if self._states[-1].state_id == state.state_id:
                return
            self._states.pop()
        state.load()
        self._states.append(state)

    def pop_state(self) -> None:
        """Remove the top state, giving it a last load call as it leaves."""
        if self._states:
            self._states[-1].load()
            self._states.pop()