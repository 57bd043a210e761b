"""Keyboard and quit-event tracking."""

from __future__ import annotations

from collections.abc import Iterable

import pygame


class InputHandler:
    """Remembers which keys are held and whether quitting was asked for."""

    def __init__(self) -> None:
        self._pressed: set[int] = set()
        self.quit_requested = False

    def process(self, events: Iterable[pygame.event.Event]) -> bool:
        """Apply a batch of events; return whether a quit has been requested."""
        for event in events:
            if event.type == pygame.QUIT:
                self.quit_requested = True
            elif event.type == pygame.KEYDOWN:
                self._pressed.add(event.key)
            elif event.type == pygame.KEYUP:
                self._pressed.discard(event.key)
        return self.quit_requested

    def update(self) -> bool:
        """Drain pygame's event queue."""
        return self.process(pygame.event.get())

    def is_key_down(self, key: int) -> bool:
        return key in self._pressed