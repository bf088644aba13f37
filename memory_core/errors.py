from __future__ import annotations


class GameError(Exception):
    """Base class for every error raised by the Memory core."""


class ConfigurationError(GameError, ValueError):
    """Invalid setup: roster size, player name or grid dimensions."""


class InvalidGuessError(GameError, ValueError):
    """A coordinate handed to the state machine is out of bounds, empty or already face-up."""


class GameStateError(GameError, RuntimeError):
    """An operation is not allowed in the current phase of the match."""
