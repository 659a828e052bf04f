"""
Exact minimax solver over a fully expanded game tree.

Values are from X's point of view: +1 X wins, -1 O wins, 0 draw.
No caching: every query walks the tree again.
"""

from typing import Iterable, Iterator, List, Tuple

from .board import BoardState, Move, Outcome, OutcomeKind, Player
from .errors import GameOver, InvariantViolation
from .tree import GameTree, Node


def outcome_value(outcome: Outcome) -> float:
    """Scalar value of a leaf outcome."""
    if outcome.kind is OutcomeKind.VICTORY:
        return 1.0 if outcome.winner is Player.X else -1.0
    # Draw, Ambiguous, and an in-progress leaf all count as 0
    return 0.0


def select_optimal(player: Player, evaluations: Iterable[Tuple[Move, float]]) -> Tuple[List[Move], float]:
    """
    Pick the moves with the best value for `player` out of (move, value) pairs.

    A strictly better value restarts the list; an equal one is appended, so
    ties keep the order they arrive in.
    """
    # Strictly worse than anything reachable
    best_v = -2.0 if player is Player.X else 2.0
    best_moves: List[Move] = []

    for m, v in evaluations:
        improves = v > best_v if player is Player.X else v < best_v
        if improves:
            best_v = v
            best_moves = [m]
        elif v == best_v:
            best_moves.append(m)

    return best_moves, best_v


class Solver:
    """Minimax evaluator for a GameTree."""

    def __init__(self, tree: GameTree):
        self.tree = tree

    @classmethod
    def from_board(cls, board: BoardState) -> "Solver":
        return cls(GameTree.build_from(board))

    def evaluate(self, node: Node) -> float:
        """
        Minimax value of a node.

        Leaves map through `outcome_value`; X maximises, O minimises.
        """
        if not node.children:
            return outcome_value(node.board.get_outcome())

        player = node.get_active_player()
        if player is None:
            raise InvariantViolation(
                "There's no active player even though the node has children."
            )

        values = [self.evaluate(child) for child in node.children]
        return max(values) if player is Player.X else min(values)

    def get_evaluation(self) -> float:
        return self.evaluate(self.tree.get_root())

    def iter_move_evaluations(self) -> Iterator[Tuple[Move, float]]:
        """
        Yield (move, value) for every legal root move, in legal-move order.

        Raises:
            GameOver: if the root position is already decided
        """
        root = self.tree.get_root()
        if root.get_active_player() is None:
            raise GameOver()

        for m in root.get_legal_moves():
            child = root.get_child(m.row, m.col)
            if child is None:
                raise InvariantViolation(f"Legal move {m} was not expanded")
            yield m, self.evaluate(child)

    def get_move_evaluations(self) -> List[Tuple[Move, float]]:
        return list(self.iter_move_evaluations())

    def get_optimal_moves(self) -> Tuple[List[Move], float]:
        """
        Compute the best moves and the value they reach.

        Returns:
            (moves, value) where:
            - moves: every root move attaining the optimum, in legal-move order
            - value: +1/0/-1 from X's point of view

        Raises:
            GameOver: if the root position is already decided
        """
        player = self.tree.get_root().get_active_player()
        if player is None:
            raise GameOver()
        return select_optimal(player, self.iter_move_evaluations())

    def get_next_moves(self) -> List[Move]:
        moves, _ = self.get_optimal_moves()
        return moves
