"""
Board symmetries: the 8 rotations and reflections of the 3x3 grid.

Transform ids:
  0 identity, 1-3 quarter, half and three-quarter turns clockwise,
  4 mirror left/right, 5 mirror top/bottom, 6 transpose, 7 anti-transpose

A board and its images share the same value, and the optimal moves of an
image are the images of the original's optimal moves.
"""

from typing import List, Tuple

import torch

from .board import Bitboard, BoardState, Move

# Cell (row, col) -> image cell, indexed by transform id
_CELL_TRANSFORMS = (
    lambda r, c: (r, c),
    lambda r, c: (c, 2 - r),
    lambda r, c: (2 - r, 2 - c),
    lambda r, c: (2 - c, r),
    lambda r, c: (r, 2 - c),
    lambda r, c: (2 - r, c),
    lambda r, c: (c, r),
    lambda r, c: (2 - c, 2 - r),
)


def _transform_cell(r: int, c: int, k: int) -> Tuple[int, int]:
    return _CELL_TRANSFORMS[k](r, c)


def _build_symmetry_maps():
    """One gather map per transform: image[i] = source[map[i]], row-major."""
    maps = []
    for k in range(len(_CELL_TRANSFORMS)):
        mp = [0] * 9
        for src in range(9):
            dst = Move(*_transform_cell(src // 3, src % 3, k)).index
            mp[dst] = src
        maps.append(torch.tensor(mp, dtype=torch.long))
    return maps


# Gather maps as long tensors, usable on policies of any device
SYM_MAPS = _build_symmetry_maps()
N_SYMMETRIES = len(SYM_MAPS)


def _check_sym_id(sym_id: int):
    if not 0 <= sym_id < N_SYMMETRIES:
        raise ValueError(f"Symmetry id must be in [0, {N_SYMMETRIES}), got {sym_id}")


def transform_move(move: Move, sym_id: int) -> Move:
    """Image of a move under transform `sym_id`."""
    _check_sym_id(sym_id)
    return Move(*_transform_cell(move.row, move.col, sym_id))


def _transform_bitboard(bb: Bitboard, sym_id: int) -> Bitboard:
    return Bitboard.from_cells(
        _transform_cell(r, c, sym_id)
        for r in range(3) for c in range(3) if bb.is_set(r, c)
    )


def transform_board(board: BoardState, sym_id: int) -> BoardState:
    """Image of a board: both players' marks are moved cell by cell."""
    _check_sym_id(sym_id)
    return BoardState(_transform_bitboard(board.x, sym_id), _transform_bitboard(board.o, sym_id))


def apply_symmetry_policy(pi: torch.Tensor, sym_id: int) -> torch.Tensor:
    """
    Move a row-major 9-cell distribution along with its board.

    For a solver root `b`, `apply_symmetry_policy(policy_targets(b)[0], k)`
    equals the targets of `transform_board(b, k)`.
    """
    _check_sym_id(sym_id)
    mp = SYM_MAPS[sym_id].to(pi.device)
    return pi.index_select(0, mp)


def get_all_symmetries(board: BoardState) -> List[BoardState]:
    """Return all 8 symmetric versions of a board."""
    return [transform_board(board, k) for k in range(N_SYMMETRIES)]


def canonical_form(board: BoardState) -> BoardState:
    """Representative of the board's symmetry class (smallest mask pair)."""
    return min(get_all_symmetries(board), key=lambda b: (b.x.bits, b.o.bits))
