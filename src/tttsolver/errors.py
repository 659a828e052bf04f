"""
Error types raised by the solver and its text helpers.

Everything a caller can recover from derives from TicTacToeError.
InvariantViolation signals a broken tree and is not part of it.
"""


class TicTacToeError(Exception):
    """Base class for recoverable solver errors."""


class InvalidPosition(TicTacToeError, ValueError):
    """Board text or grid could not be turned into a position."""


class InvalidMove(TicTacToeError, ValueError):
    """Move text could not be turned into a cell coordinate."""


class NotPlayersTurn(TicTacToeError):
    """A move was attempted by the player who is not on turn."""

    def __init__(self, player):
        self.player = player
        super().__init__(f"It is not {player}'s turn")


class CellOccupied(TicTacToeError):
    """A move targeted a cell that already holds a mark."""

    def __init__(self, move):
        self.move = move
        super().__init__(f"Move {move} has already been made")


class GameOver(TicTacToeError):
    """An optimal-move query was issued against a finished game."""

    def __init__(self, message: str = "The game is already over."):
        super().__init__(message)


class InvariantViolation(RuntimeError):
    """The tree or board logic produced an impossible node."""
