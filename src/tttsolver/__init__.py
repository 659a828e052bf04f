"""
tttsolver - Exact TicTacToe solver.

This package expands the full game tree of a 3x3 position and runs plain
minimax over it to find the optimal moves and the game value.
"""

from .board import AMBIGUOUS, DRAW, IN_PROGRESS, Bitboard, BoardState, Move, Outcome, OutcomeKind, Player
from .errors import (
    CellOccupied,
    GameOver,
    InvalidMove,
    InvalidPosition,
    InvariantViolation,
    NotPlayersTurn,
    TicTacToeError,
)
from .tree import GameTree, Node
from .solver import Solver, outcome_value, select_optimal
from .config import NotationConfig, SolveConfig
from .notation import parse_position, format_position, parse_move, format_move
from .symmetries import transform_board, transform_move, apply_symmetry_policy, canonical_form, SYM_MAPS
from .targets import legal_move_mask, policy_targets, iter_reachable_positions
from .play import choose_move, play_optimal_game

__version__ = "0.1.0"
__all__ = [
    "DRAW",
    "IN_PROGRESS",
    "AMBIGUOUS",
    "Bitboard",
    "BoardState",
    "Move",
    "Outcome",
    "OutcomeKind",
    "Player",
    "TicTacToeError",
    "InvalidPosition",
    "InvalidMove",
    "NotPlayersTurn",
    "CellOccupied",
    "GameOver",
    "InvariantViolation",
    "GameTree",
    "Node",
    "Solver",
    "outcome_value",
    "select_optimal",
    "NotationConfig",
    "SolveConfig",
    "parse_position",
    "format_position",
    "parse_move",
    "format_move",
    "transform_board",
    "transform_move",
    "apply_symmetry_policy",
    "canonical_form",
    "SYM_MAPS",
    "legal_move_mask",
    "policy_targets",
    "iter_reachable_positions",
    "choose_move",
    "play_optimal_game",
]
