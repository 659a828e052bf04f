"""
Play positions out with the solver on both sides.
"""

import random
from typing import List, Optional, Tuple

from .board import BoardState, Move
from .errors import GameOver
from .solver import Solver


def choose_move(board: BoardState, rng: Optional[random.Random] = None) -> Move:
    """
    Pick an optimal move for the side to move.

    With `rng`, ties are broken at random; otherwise the first optimal move
    in legal order is taken.
    """
    if board.get_active_player() is None:
        raise GameOver()
    best_moves = Solver.from_board(board).get_next_moves()
    if rng is not None:
        return rng.choice(best_moves)
    return best_moves[0]


def play_optimal_game(
    board: Optional[BoardState] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[BoardState, List[Move]]:
    """
    Play from `board` (default empty) until the game ends.

    Returns:
        (final_board, moves) with moves in the order they were played
    """
    board = board if board is not None else BoardState.empty()
    moves: List[Move] = []
    while True:
        player = board.get_active_player()
        if player is None:
            return board, moves
        m = choose_move(board, rng)
        board = board.make_move(player, m)
        moves.append(m)
