"""
TicTacToe board rules and state.

Board representation: two 9-bit masks, one per player.
  - cell (row, col) lives at bit (2 - row) * 3 + (2 - col)
  - so bit 8 is the top-left cell and bit 0 the bottom-right one
  - a nine character binary literal therefore reads row-major

X always moves first. Side to move is inferred from the mark counts.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .errors import CellOccupied, InvalidPosition, NotPlayersTurn

FULL_MASK = 0b111111111

# Winning lines (rows, columns, diagonals)
WIN_MASKS = (
    0b111000000, 0b000111000, 0b000000111,  # rows
    0b100100100, 0b010010010, 0b001001001,  # columns
    0b100010001, 0b001010100,               # diagonals
)


def _bit(row: int, col: int) -> int:
    """Convert (row, col) to its single-bit mask."""
    return 1 << ((2 - row) * 3 + (2 - col))


class Player(Enum):
    """The two players. X moves first."""
    X = "X"
    O = "O"

    def opponent(self) -> "Player":
        return Player.O if self is Player.X else Player.X

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Move:
    """A cell coordinate. The player making it is passed separately."""
    __slots__ = ("row", "col")

    row: int
    col: int

    def __post_init__(self):
        if not (0 <= self.row <= 2 and 0 <= self.col <= 2):
            raise ValueError(f"Cell out of range: ({self.row}, {self.col})")

    @property
    def index(self) -> int:
        """Row-major flat index (0-8)."""
        return self.row * 3 + self.col

    @classmethod
    def from_index(cls, index: int) -> "Move":
        return cls(index // 3, index % 3)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass(frozen=True)
class Bitboard:
    """Set of cells held by one player, packed into 9 bits."""
    __slots__ = ("bits",)

    bits: int

    @classmethod
    def empty(cls) -> "Bitboard":
        return cls(0)

    @classmethod
    def full(cls) -> "Bitboard":
        return cls(FULL_MASK)

    @classmethod
    def from_binary(cls, binary: str) -> "Bitboard":
        """
        Build a bitboard from a nine character string of 0/1.

        The first character is cell (0, 0), the last cell (2, 2).
        """
        if len(binary) != 9:
            raise ValueError(f"Binary string must be 9 characters long, got {len(binary)}")
        bits = 0
        for i, c in enumerate(binary):
            if c == "1":
                bits |= _bit(i // 3, i % 3)
            elif c != "0":
                raise ValueError(f"Invalid character in binary string: {c!r}")
        return cls(bits)

    @classmethod
    def from_cells(cls, cells) -> "Bitboard":
        bits = 0
        for row, col in cells:
            bits |= _bit(row, col)
        return cls(bits)

    def union(self, other: "Bitboard") -> "Bitboard":
        return Bitboard(self.bits | other.bits)

    def intersection(self, other: "Bitboard") -> "Bitboard":
        return Bitboard(self.bits & other.bits)

    def difference(self, other: "Bitboard") -> "Bitboard":
        return Bitboard(self.bits & ~other.bits & FULL_MASK)

    def contains(self, other: "Bitboard") -> bool:
        """True if every bit of `other` is also set here."""
        return self.bits & other.bits == other.bits

    def is_empty(self) -> bool:
        return self.bits == 0

    def is_set(self, row: int, col: int) -> bool:
        return bool(self.bits & _bit(row, col))

    def with_cell(self, row: int, col: int) -> "Bitboard":
        return Bitboard(self.bits | _bit(row, col))

    def n_set(self) -> int:
        return bin(self.bits).count("1")

    def is_victory(self) -> bool:
        """Check whether the mask covers any of the eight winning lines."""
        bits = self.bits
        return any(bits & line == line for line in WIN_MASKS)

    def to_binary(self) -> str:
        return "".join("1" if self.is_set(i // 3, i % 3) else "0" for i in range(9))


class OutcomeKind(Enum):
    VICTORY = "victory"
    DRAW = "draw"
    IN_PROGRESS = "in_progress"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class Outcome:
    """
    Classification of a board.

    AMBIGUOUS means both players hold a line. Legal play never gets there,
    but raw construction can.
    """
    kind: OutcomeKind
    winner: Optional[Player] = None

    @classmethod
    def victory(cls, player: Player) -> "Outcome":
        return cls(OutcomeKind.VICTORY, player)

    @property
    def is_terminal(self) -> bool:
        return self.kind is not OutcomeKind.IN_PROGRESS

    def __str__(self) -> str:
        if self.kind is OutcomeKind.VICTORY:
            return f"Victory({self.winner})"
        return {
            OutcomeKind.DRAW: "Draw",
            OutcomeKind.IN_PROGRESS: "InProgress",
            OutcomeKind.AMBIGUOUS: "Ambiguous",
        }[self.kind]


DRAW = Outcome(OutcomeKind.DRAW)
IN_PROGRESS = Outcome(OutcomeKind.IN_PROGRESS)
AMBIGUOUS = Outcome(OutcomeKind.AMBIGUOUS)


@dataclass(frozen=True)
class BoardState:
    """Immutable position: X's marks and O's marks."""
    __slots__ = ("x", "o")

    x: Bitboard
    o: Bitboard

    @classmethod
    def empty(cls) -> "BoardState":
        return cls(Bitboard.empty(), Bitboard.empty())

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[Optional[Player]]]) -> "BoardState":
        """
        Build a board from a 3x3 grid indexed grid[row][col].

        Each cell is None, Player.X or Player.O.
        """
        if len(grid) != 3 or any(len(row) != 3 for row in grid):
            raise InvalidPosition("Grid must be 3x3")
        x_cells, o_cells = [], []
        for r, row in enumerate(grid):
            for c, mark in enumerate(row):
                if mark is Player.X:
                    x_cells.append((r, c))
                elif mark is Player.O:
                    o_cells.append((r, c))
                elif mark is not None:
                    raise InvalidPosition(f"Invalid mark at ({r}, {c}): {mark!r}")
        return cls(Bitboard.from_cells(x_cells), Bitboard.from_cells(o_cells))

    def to_grid(self) -> List[List[Optional[Player]]]:
        return [[self.mark_at(r, c) for c in range(3)] for r in range(3)]

    def mark_at(self, row: int, col: int) -> Optional[Player]:
        if self.x.is_set(row, col):
            return Player.X
        if self.o.is_set(row, col):
            return Player.O
        return None

    def is_occupied(self, row: int, col: int) -> bool:
        return self.x.is_set(row, col) or self.o.is_set(row, col)

    def is_full(self) -> bool:
        return self.x.union(self.o) == Bitboard.full()

    def get_outcome(self) -> Outcome:
        x_victory = self.x.is_victory()
        o_victory = self.o.is_victory()
        if x_victory and o_victory:
            return AMBIGUOUS
        if x_victory:
            return Outcome.victory(Player.X)
        if o_victory:
            return Outcome.victory(Player.O)
        if self.is_full():
            return DRAW
        return IN_PROGRESS

    def get_active_player(self) -> Optional[Player]:
        """Side to move, or None once the game is decided."""
        if self.get_outcome().is_terminal:
            return None
        return Player.X if self.x.n_set() == self.o.n_set() else Player.O

    def get_legal_moves(self) -> List[Move]:
        """Empty cells in row-major order."""
        taken = self.x.bits | self.o.bits
        return [Move(r, c) for r in range(3) for c in range(3) if not taken & _bit(r, c)]

    def make_move(self, player: Player, move: Move) -> "BoardState":
        """Return the board with `player`'s mark added at `move`."""
        if self.get_active_player() is not player:
            raise NotPlayersTurn(player)
        if self.is_occupied(move.row, move.col):
            raise CellOccupied(move)
        if player is Player.X:
            return BoardState(self.x.with_cell(move.row, move.col), self.o)
        return BoardState(self.x, self.o.with_cell(move.row, move.col))
