import pytest

from tttsolver import (
    AMBIGUOUS,
    DRAW,
    IN_PROGRESS,
    Bitboard,
    BoardState,
    CellOccupied,
    InvalidPosition,
    Move,
    NotPlayersTurn,
    Outcome,
    OutcomeKind,
    Player,
    iter_reachable_positions,
    parse_position,
)


def test_board_instantiates():
    board = parse_position("___ ___ _O_")
    assert board == BoardState(Bitboard.empty(), Bitboard.from_binary("000000010"))


@pytest.mark.parametrize("text, outcome", [
    ("XOX OXO XOX", Outcome.victory(Player.X)),
    ("XOX OOO _XX", Outcome.victory(Player.O)),
    ("XOX XXO OXO", DRAW),
    ("XOX ___ ___", IN_PROGRESS),
    ("XXX ___ OOO", AMBIGUOUS),
])
def test_board_determines_outcome(text, outcome):
    assert parse_position(text).get_outcome() == outcome


def test_bitboard_algebra():
    bb = Bitboard.empty()
    assert bb == Bitboard(0)
    assert bb.is_empty()

    bb = bb.with_cell(1, 2).with_cell(2, 2)
    assert bb == Bitboard.from_binary("000001001")
    assert Bitboard.empty().with_cell(2, 1) == Bitboard(2)

    other = Bitboard.from_binary("110000001")
    assert bb.union(other) == Bitboard.from_binary("110001001")
    assert bb.intersection(other) == Bitboard.from_binary("000000001")
    assert other.difference(bb) == Bitboard.from_binary("110000000")
    assert other.contains(Bitboard.from_binary("100000000"))
    assert not other.contains(bb)
    assert other.n_set() == 3
    assert other.to_binary() == "110000001"


def test_bitboard_rejects_bad_binary():
    with pytest.raises(ValueError):
        Bitboard.from_binary("0101")
    with pytest.raises(ValueError):
        Bitboard.from_binary("00000000x")


def test_bitboard_victory_lines():
    assert Bitboard.from_binary("111000000").is_victory()
    assert Bitboard.from_binary("010010010").is_victory()
    assert Bitboard.from_binary("001010100").is_victory()
    assert not Bitboard.from_binary("110001000").is_victory()


def test_board_moves():
    board = BoardState.empty().make_move(Player.X, Move(2, 1))
    assert board == parse_position("___ ___ _X_")


def test_make_move_leaves_original_untouched():
    board = BoardState.empty()
    after = board.make_move(Player.X, Move(0, 0))
    assert board == BoardState.empty()
    assert after != board


def test_board_gets_active_player():
    assert parse_position("___ ___ ___").get_active_player() is Player.X
    assert parse_position("___ ___ _X_").get_active_player() is Player.O
    assert parse_position("XOX O_O XOX").get_active_player() is Player.X
    assert parse_position("X_X OOO X__").get_active_player() is None
    assert parse_position("XOX OXO XOX").get_active_player() is None


def test_move_to_occupied_cell_fails():
    board = parse_position("X__ ___ ___")
    with pytest.raises(CellOccupied) as exc:
        board.make_move(Player.O, Move(0, 0))
    assert exc.value.move == Move(0, 0)
    assert board == parse_position("X__ ___ ___")


def test_move_by_wrong_player_fails():
    board = parse_position("X__ ___ ___")
    with pytest.raises(NotPlayersTurn) as exc:
        board.make_move(Player.X, Move(1, 1))
    assert exc.value.player is Player.X
    assert board == parse_position("X__ ___ ___")


def test_move_after_game_over_fails():
    board = parse_position("XXX OO_ ___")
    with pytest.raises(NotPlayersTurn):
        board.make_move(Player.O, Move(1, 2))


def test_active_player_alternates_until_game_ends():
    board = BoardState.empty()
    expected = Player.X
    # X wins on the main diagonal after five moves
    for m in [Move(0, 0), Move(0, 1), Move(1, 1), Move(0, 2), Move(2, 2)]:
        assert board.get_active_player() is expected
        board = board.make_move(expected, m)
        expected = expected.opponent()
    assert board.get_outcome() == Outcome.victory(Player.X)
    assert board.get_active_player() is None


def test_legal_moves_are_row_major():
    board = parse_position("X__ _O_ __X")
    assert board.get_legal_moves() == [
        Move(0, 1), Move(0, 2), Move(1, 0), Move(1, 2), Move(2, 0), Move(2, 1),
    ]
    assert len(BoardState.empty().get_legal_moves()) == 9


def test_is_full():
    assert parse_position("XOX XXO OXO").is_full()
    assert not parse_position("XOX XXO OX_").is_full()


def test_grid_round_trip():
    grid = [
        [Player.X, None, None],
        [None, Player.O, None],
        [None, None, Player.X],
    ]
    board = BoardState.from_grid(grid)
    assert board == parse_position("X__ _O_ __X")
    assert board.to_grid() == grid
    assert board.mark_at(1, 1) is Player.O
    assert board.is_occupied(2, 2)
    assert not board.is_occupied(0, 1)


def test_from_grid_rejects_bad_shape():
    with pytest.raises(InvalidPosition):
        BoardState.from_grid([[None] * 3] * 2)
    with pytest.raises(InvalidPosition):
        BoardState.from_grid([[None, None, "Z"], [None] * 3, [None] * 3])


def test_move_range_and_index():
    assert Move(1, 2).index == 5
    assert Move.from_index(7) == Move(2, 1)
    assert str(Move(1, 2)) == "(1, 2)"
    with pytest.raises(ValueError):
        Move(3, 0)


def test_active_player_alternates_on_every_reachable_board():
    for board in iter_reachable_positions():
        player = board.get_active_player()
        for m in board.get_legal_moves():
            child = board.make_move(player, m)
            assert child.get_active_player() in (player.opponent(), None)


def test_outcome_constants():
    assert DRAW == Outcome(OutcomeKind.DRAW)
    assert IN_PROGRESS == Outcome(OutcomeKind.IN_PROGRESS)
    assert AMBIGUOUS == Outcome(OutcomeKind.AMBIGUOUS)
    assert not IN_PROGRESS.is_terminal
    assert DRAW.is_terminal and AMBIGUOUS.is_terminal
    assert DRAW.winner is None
    assert str(AMBIGUOUS) == "Ambiguous"
    assert str(Outcome.victory(Player.O)) == "Victory(O)"
