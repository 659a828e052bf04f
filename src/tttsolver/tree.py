"""
Exhaustive game tree.

Every board reachable by legal play from a root position, expanded eagerly
down to terminal positions. Nodes are never shared or mutated after the
tree is built.
"""

from collections import Counter
from typing import Iterator, List, Optional, Tuple

from .board import BoardState, Move, Player


class Node:
    """A position in the tree plus the ordered children reached from it."""

    __slots__ = ("board", "move", "children")

    def __init__(self, board: BoardState, move: Optional[Move], children: Tuple["Node", ...]):
        self.board = board
        self.move = move  # Edge label from the parent; None at the root
        self.children = children

    def get_board(self) -> BoardState:
        return self.board

    def get_children(self) -> Tuple["Node", ...]:
        return self.children

    def get_active_player(self) -> Optional[Player]:
        return self.board.get_active_player()

    def get_legal_moves(self) -> List[Move]:
        return self.board.get_legal_moves()

    def get_child(self, row: int, col: int) -> Optional["Node"]:
        """Child reached by playing (row, col), or None if it was not expanded."""
        for child in self.children:
            if child.move.row == row and child.move.col == col:
                return child
        return None

    def is_terminal(self) -> bool:
        return not self.children

    def iter_nodes(self) -> Iterator["Node"]:
        """Pre-order walk of this subtree."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __repr__(self) -> str:
        return f"Node(move={self.move}, children={len(self.children)})"


def _expand(board: BoardState, move: Optional[Move]) -> Node:
    player = board.get_active_player()
    if player is None:
        return Node(board, move, ())
    children = tuple(
        _expand(board.make_move(player, m), m)
        for m in board.get_legal_moves()
    )
    return Node(board, move, children)


class GameTree:
    """Fully expanded tree rooted at a given board."""

    def __init__(self, root: Node):
        self._root = root

    @classmethod
    def build_from(cls, root_board: BoardState) -> "GameTree":
        return cls(_expand(root_board, None))

    def get_root(self) -> Node:
        return self._root

    def size(self) -> int:
        """Number of nodes, root included."""
        return sum(1 for _ in self._root.iter_nodes())

    def depth(self) -> int:
        """Longest root-to-leaf path, in moves."""
        best = 0
        stack = [(self._root, 0)]
        while stack:
            node, d = stack.pop()
            if d > best:
                best = d
            stack.extend((child, d + 1) for child in node.children)
        return best

    def count_outcomes(self) -> Counter:
        """Tally of leaf outcomes, i.e. complete games per result."""
        tally: Counter = Counter()
        for node in self._root.iter_nodes():
            if node.is_terminal():
                tally[node.board.get_outcome()] += 1
        return tally
