import pytest

from tttsolver import BoardState, Solver, parse_position


@pytest.fixture(scope="session")
def empty_solver():
    """Solver for the empty board (~550k node tree, built once)."""
    return Solver.from_board(BoardState.empty())


@pytest.fixture
def solve():
    def _solve(text):
        return Solver.from_board(parse_position(text))
    return _solve
