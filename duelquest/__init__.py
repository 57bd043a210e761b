"""A pygame tile-map adventure in which touching a character on the map starts a duel."""

__version__ = "0.1.0"