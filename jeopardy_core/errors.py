from __future__ import annotations


class JeopardyError(Exception):
    """Base class for errors raised by the jeopardy core."""


class DataUnavailable(JeopardyError):
    """The trivia source is unreachable or cannot supply enough categories/clues."""


class IndexOutOfRange(JeopardyError, IndexError):
    """A reveal or cell id addressed a position outside the board."""


class NoActiveGame(JeopardyError):
    """No board has been installed yet (or the last setup failed)."""
