import pytest
import torch

from tttsolver import (
    BoardState,
    GameOver,
    iter_reachable_positions,
    legal_move_mask,
    parse_position,
    policy_targets,
)


def test_policy_targets_single_best_move(solve):
    pi, v = policy_targets(solve("XOX O_O XOX"))
    expected = torch.zeros(9)
    expected[4] = 1.0
    assert torch.equal(pi, expected)
    assert v.item() == 1.0
    assert pi.dtype == torch.float32


def test_policy_targets_are_side_to_move_relative(solve):
    # O to move and winning: solver value is -1, target value is +1
    solver = solve("XOX _O_ __X")
    assert solver.get_evaluation() == -1.0
    pi, v = policy_targets(solver)
    assert v.item() == 1.0
    assert pi[5].item() == pytest.approx(0.5)
    assert pi[7].item() == pytest.approx(0.5)
    assert pi.sum().item() == pytest.approx(1.0)


def test_policy_targets_on_finished_game(solve):
    with pytest.raises(GameOver):
        policy_targets(solve("XOX OXO XOX"))


def test_legal_move_mask():
    mask = legal_move_mask(parse_position("XO_ O__ XXO"))
    assert mask.tolist() == [False, False, True, False, True, True, False, False, False]


def test_reachable_positions_from_empty_board():
    positions = list(iter_reachable_positions())
    assert len(positions) == 4520
    assert len(set(positions)) == len(positions)
    assert positions[0] == BoardState.empty()
    assert all(b.get_active_player() is not None for b in positions)


def test_reachable_positions_from_finished_board():
    assert list(iter_reachable_positions(parse_position("XOX OXO XOX"))) == []


def test_package_exports_resolve():
    import tttsolver
    for name in tttsolver.__all__:
        assert hasattr(tttsolver, name), name
    assert "legal_move_mask" in tttsolver.__all__
    assert not hasattr(tttsolver.targets, "board_to_tokens_perspective")
