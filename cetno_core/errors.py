from __future__ import annotations


class GameError(Exception):
    """Base class for errors reported back to the caller of the game core."""


class InvalidPlacement(GameError):
    """The target cell is not empty, out of bounds, or fails the placement rules."""


class GameOver(GameError):
    """A move was attempted after the game reached its terminal state."""


class NotComputersTurn(GameError):
    """The computer was asked to move while it is not its turn."""
