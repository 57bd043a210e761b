import pygame

from duelquest.input_handler import InputHandler


def _down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def _up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


def test_no_key_down_initially():
    handler = InputHandler()
    assert handler.is_key_down(pygame.K_RETURN) is False


def test_key_down_then_up():
    handler = InputHandler()
    handler.process([_down(pygame.K_RIGHT)])
    assert handler.is_key_down(pygame.K_RIGHT) is True
    assert handler.is_key_down(pygame.K_LEFT) is False
    handler.process([_up(pygame.K_RIGHT)])
    assert handler.is_key_down(pygame.K_RIGHT) is False


def test_several_keys_held():
    handler = InputHandler()
    handler.process([_down(pygame.K_UP), _down(pygame.K_LEFT), _up(pygame.K_UP)])
    assert handler.is_key_down(pygame.K_LEFT) is True
    assert handler.is_key_down(pygame.K_UP) is False


def test_quit_event_is_reported():
    handler = InputHandler()
    assert handler.process([_down(pygame.K_a)]) is False
    assert handler.process([pygame.event.Event(pygame.QUIT)]) is True
    assert handler.quit_requested is True


def test_other_events_are_ignored():
    handler = InputHandler()
    result = handler.process([pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1))])
    assert result is False
    assert handler.is_key_down(pygame.K_a) is False