"""
Text notation for positions and moves.

Position text lists rows top to bottom, each row left to right, so the
k-th mark (whitespace ignored) lands on cell (k // 3, k % 3):

    XOX
    O_O
    XOX

Moves are two digits, row then column: "1 2" is Move(1, 2).
"""

from typing import Optional

from .board import Bitboard, BoardState, Move, Player
from .config import NotationConfig
from .errors import InvalidMove, InvalidPosition


def _strip(text: str) -> str:
    return "".join(c for c in text if not c.isspace())


def parse_position(text: str, config: Optional[NotationConfig] = None) -> BoardState:
    """
    Parse position text into a board.

    Raises:
        InvalidPosition: wrong number of marks or an unknown character
    """
    config = config or NotationConfig()
    marks = _strip(text)
    if len(marks) != 9:
        raise InvalidPosition(f"Invalid position string: {text!r} ({len(marks)} marks, expected 9)")

    x_cells, o_cells = [], []
    for k, c in enumerate(marks):
        cell = (k // 3, k % 3)
        if c == config.x_mark:
            x_cells.append(cell)
        elif c == config.o_mark:
            o_cells.append(cell)
        elif c != config.empty_mark:
            raise InvalidPosition(f"Invalid character: {c!r}")
    return BoardState(Bitboard.from_cells(x_cells), Bitboard.from_cells(o_cells))


def format_position(board: BoardState, config: Optional[NotationConfig] = None) -> str:
    """Render a board as three lines of marks."""
    config = config or NotationConfig()
    symbols = {None: config.empty_mark, Player.X: config.x_mark, Player.O: config.o_mark}
    return "\n".join("".join(symbols[mark] for mark in row) for row in board.to_grid())


def parse_move(text: str) -> Move:
    """
    Parse "row col" (whitespace optional) into a Move.

    Raises:
        InvalidMove: anything but two digits in 0-2
    """
    digits = _strip(text)
    if len(digits) != 2 or any(d not in "012" for d in digits):
        raise InvalidMove(f"Invalid move string: {text!r}")
    return Move(int(digits[0]), int(digits[1]))


def format_move(move: Move) -> str:
    return str(move)
