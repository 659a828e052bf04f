"""
Command-line interface for the TicTacToe solver.

Usage:
    tttsolver solve "XOX O_O XOX"
    tttsolver analyse "X__ _O_ ___"
    tttsolver play --as O
    tttsolver stats "___ _X_ ___"
"""

import argparse
import random
import sys
from typing import List, Optional

from tqdm.auto import tqdm

from .board import BoardState, Player
from .config import NotationConfig, SolveConfig
from .errors import CellOccupied, GameOver, InvalidMove, InvalidPosition, NotPlayersTurn
from .notation import format_move, format_position, parse_move, parse_position
from .play import choose_move
from .solver import Solver, select_optimal
from .tree import GameTree

EXIT_OK = 0
EXIT_GAME_OVER = 1
EXIT_INVALID = 2


def _format_moves(moves) -> str:
    return "[" + ", ".join(format_move(m) for m in moves) + "]"


def _load(position: str, config: SolveConfig) -> Optional[BoardState]:
    try:
        return parse_position(position, config.notation)
    except InvalidPosition as e:
        print(f"Invalid Position: {e}")
        return None


def cmd_solve(position: str, config: SolveConfig) -> int:
    """Print the optimal moves and the evaluation of a position."""
    board = _load(position, config)
    if board is None:
        return EXIT_INVALID

    solver = Solver.from_board(board)
    try:
        moves, value = solver.get_optimal_moves()
    except GameOver as e:
        print(e)
        print(f"Outcome: {board.get_outcome()}")
        return EXIT_GAME_OVER

    print(f"Next moves: {_format_moves(moves)}")
    print(f"Evaluation: {value:+.1f}")
    return EXIT_OK


def cmd_analyse(position: str, config: SolveConfig) -> int:
    """Print the value of every legal move."""
    board = _load(position, config)
    if board is None:
        return EXIT_INVALID

    player = board.get_active_player()
    if player is None:
        print(GameOver())
        print(f"Outcome: {board.get_outcome()}")
        return EXIT_GAME_OVER

    solver = Solver.from_board(board)

    print(format_position(board, config.notation))
    print(f"\n{player} to move\n")
    evaluations = []
    progress = tqdm(
        solver.iter_move_evaluations(),
        total=len(board.get_legal_moves()),
        desc="Evaluating moves",
        disable=not config.show_progress,
    )
    for m, v in progress:
        evaluations.append((m, v))
        tqdm.write(f"  {format_move(m)}  {v:+.1f}")

    best_moves, best = select_optimal(player, evaluations)
    print(f"\nBest: {_format_moves(best_moves)} ({best:+.1f})")
    return EXIT_OK


def cmd_stats(position: str, config: SolveConfig) -> int:
    """Print the size and game tallies of the tree rooted at a position."""
    board = _load(position, config)
    if board is None:
        return EXIT_INVALID

    tree = GameTree.build_from(board)
    print(f"Nodes:  {tree.size():,}")
    print(f"Depth:  {tree.depth()}")
    print("Games:")
    for outcome, n in sorted(tree.count_outcomes().items(), key=lambda kv: str(kv[0])):
        print(f"  {str(outcome):<12} {n:,}")
    return EXIT_OK


def cmd_play(position: str, human: Player, config: SolveConfig, stdin=None) -> int:
    """Play a game against the solver."""
    board = _load(position, config)
    if board is None:
        return EXIT_INVALID
    stdin = stdin or sys.stdin
    rng = random.Random(config.seed) if config.seed is not None else None

    print("\n=== Interactive Game ===")
    print(f"You are {human}")
    print("Enter moves as 'row col', rows and columns 0-2")
    print()

    while True:
        print(format_position(board, config.notation))
        print()

        player = board.get_active_player()
        if player is None:
            outcome = board.get_outcome()
            if outcome.winner is human:
                print("You win!")
            elif outcome.winner is not None:
                print("Solver wins!")
            else:
                print(f"{outcome}!")
            return EXIT_OK

        if player is human:
            print(f"Your move ({_format_moves(board.get_legal_moves())}): ", end="", flush=True)
            line = stdin.readline()
            if not line:
                print("\nGame aborted")
                return EXIT_OK
            try:
                board = board.make_move(player, parse_move(line))
            except (InvalidMove, CellOccupied, NotPlayersTurn) as e:
                print(f"{e}, try again")
            continue

        m = choose_move(board, rng)
        print(f"Solver plays: {format_move(m)}")
        board = board.make_move(player, m)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solver for Tic Tac Toe")
    parser.add_argument("--x-mark", type=str, default="X", help="Character for X")
    parser.add_argument("--o-mark", type=str, default="O", help="Character for O")
    parser.add_argument("--empty-mark", type=str, default="_", help="Character for an empty cell")

    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("solve", help="Solve Tic Tac Toe Position")
    p.add_argument("position", type=str, nargs="?", help="Tic Tac Toe Position")

    p = sub.add_parser("analyse", help="Evaluate every legal move")
    p.add_argument("position", type=str, nargs="?", help="Tic Tac Toe Position")
    p.add_argument("--no-progress", action="store_true", help="Hide the progress bar")

    p = sub.add_parser("play", help="Play against the solver")
    p.add_argument("position", type=str, nargs="?", help="Starting position, empty by default")
    p.add_argument("--as", dest="human", choices=["X", "O"], default="X", help="Side you play")
    p.add_argument("--seed", type=int, default=None, help="Random tie-breaking among optimal moves")

    p = sub.add_parser("stats", help="Count positions and games below a position")
    p.add_argument("position", type=str, nargs="?", help="Tic Tac Toe Position, empty by default")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        notation = NotationConfig(args.x_mark, args.o_mark, args.empty_mark)
    except ValueError as e:
        parser.error(str(e))
    config = SolveConfig(
        notation=notation,
        show_progress=not getattr(args, "no_progress", False),
        seed=getattr(args, "seed", None),
    )

    if args.command is None:
        print("Invalid command!")
        parser.print_help()
        return EXIT_INVALID

    position = args.position
    if position is None:
        if args.command in ("solve", "analyse"):
            print("Needs a Position!")
            return EXIT_INVALID
        position = notation.empty_mark * 9

    if args.command == "solve":
        return cmd_solve(position, config)
    if args.command == "analyse":
        return cmd_analyse(position, config)
    if args.command == "stats":
        return cmd_stats(position, config)
    return cmd_play(position, Player(args.human), config)


if __name__ == "__main__":
    sys.exit(main())
