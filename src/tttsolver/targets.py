"""
Policy/value targets derived from the exact solver.

Tensors use row-major cell order (index = row * 3 + col). Values here are
from the perspective of the side to move, unlike Solver values which are
always from X's point of view.
"""

from typing import Iterator, Optional, Tuple

import torch

from .board import BoardState, Player
from .errors import GameOver
from .solver import Solver


def legal_move_mask(board: BoardState) -> torch.BoolTensor:
    """Return [9] boolean mask of empty cells."""
    mask = torch.zeros(9, dtype=torch.bool)
    for m in board.get_legal_moves():
        mask[m.index] = True
    return mask


def policy_targets(solver: Solver) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Compute optimal targets for the solver's root position.

    Returns:
        pi_star: [9] tensor with uniform distribution over optimal moves
        v_star: scalar tensor in {-1, 0, +1}, side-to-move perspective

    Raises:
        GameOver: if the root position is already decided
    """
    player = solver.tree.get_root().get_active_player()
    if player is None:
        raise GameOver()
    best_moves, v = solver.get_optimal_moves()

    pi = torch.zeros(9, dtype=torch.float32)
    if best_moves:
        pi[[m.index for m in best_moves]] = 1.0 / len(best_moves)

    if player is Player.O:
        v = -v
    return pi, torch.tensor(float(v), dtype=torch.float32)


def iter_reachable_positions(root: Optional[BoardState] = None) -> Iterator[BoardState]:
    """
    Iterate over distinct non-terminal boards reachable from `root`.

    Yields:
        each board once, in depth-first discovery order
    """
    root = root if root is not None else BoardState.empty()
    seen = {root}
    stack = [root]
    while stack:
        board = stack.pop()
        player = board.get_active_player()
        if player is None:
            continue
        yield board
        for m in reversed(board.get_legal_moves()):
            child = board.make_move(player, m)
            if child not in seen:
                seen.add(child)
                stack.append(child)
