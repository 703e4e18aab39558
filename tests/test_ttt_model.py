import pytest

from snplabs.ttt_model import SIZE, Direction, Model, Position, State, WinLine

N, A, B = State.NONE, State.A, State.B

WIN_B = [
    [N, A, B],
    [A, B, N],
    [B, N, A],
]
OPEN = [
    [N, A, A],
    [A, B, N],
    [B, N, B],
]
FULL = [
    [B, A, A],
    [A, B, B],
    [B, A, A],
]


def all_positions():
    return [Position(row, col) for row in range(SIZE) for col in range(SIZE)]


def test_model_init():
    model = Model()
    assert all(state is N for row in model.board for state in row)
    assert len(model.board) == SIZE


def test_get_state_initial():
    model = Model()
    assert [model.get_state(pos) for pos in all_positions()] == [N] * 9


def test_get_state_modified():
    model = Model.from_board(WIN_B)
    for pos in all_positions():
        assert model.get_state(pos) is WIN_B[pos.row][pos.col]


def test_from_board_copies():
    board = [row[:] for row in OPEN]
    model = Model.from_board(board)
    board[0][0] = A
    assert model.get_state(Position(0, 0)) is N


def test_from_board_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Model.from_board([[N, N], [N, N]])


def test_position_out_of_range():
    with pytest.raises(ValueError):
        Position(3, 0)
    with pytest.raises(ValueError):
        Position(0, -1)


def test_winner():
    assert Model().winner() is N
    assert Model.from_board(WIN_B).winner() is B


def test_can_move():
    assert Model().can_move() is True
    assert Model.from_board(OPEN).can_move() is True
    assert Model.from_board(WIN_B).can_move() is False
    assert Model.from_board(FULL).can_move() is False


def test_move_initial():
    model = Model()
    pos_a = Position(0, 0)
    assert model.move(pos_a, A) is True
    assert model.move(pos_a, A) is False
    assert model.move(pos_a, B) is False
    pos_b = Position(2, 2)
    assert model.move(pos_b, B) is True
    assert model.move(pos_b, B) is False
    assert model.move(pos_b, A) is False
    assert model.get_state(pos_a) is A
    assert model.get_state(pos_b) is B


def test_move_while_open():
    model = Model.from_board(OPEN)
    pos = Position(2, 1)
    assert model.move(pos, A) is True
    assert model.move(pos, A) is False
    assert model.move(pos, B) is False


def test_move_after_win():
    model = Model.from_board(WIN_B)
    pos = Position(2, 1)
    assert model.move(pos, A) is False
    assert model.move(pos, B) is False
    assert model.get_state(pos) is N


def test_move_when_full():
    model = Model.from_board(FULL)
    for pos in all_positions():
        assert model.move(pos, A) is False
        assert model.move(pos, B) is False
    assert model.can_move() is False


@pytest.mark.parametrize("board", [None, OPEN, FULL])
def test_no_win_line(board):
    model = Model() if board is None else Model.from_board(board)
    assert model.win_line().dir is Direction.NONE


@pytest.mark.parametrize("row", range(SIZE))
def test_row_winner(row):
    model = Model()
    for col in range(SIZE):
        assert model.move(Position(row, col), A) is True
    assert model.win_line() == WinLine(Direction.H, Position(row, 0))


@pytest.mark.parametrize("col", range(SIZE))
def test_column_winner(col):
    model = Model()
    for row in range(SIZE):
        assert model.move(Position(row, col), A) is True
    assert model.win_line() == WinLine(Direction.V, Position(0, col))


def test_diagonal_left_right_winner():
    model = Model()
    for i in range(SIZE):
        assert model.move(Position(i, i), A) is True
    assert model.win_line() == WinLine(Direction.D, Position(0, 0))


def test_diagonal_right_left_winner():
    model = Model()
    for i in range(SIZE):
        assert model.move(Position(SIZE - 1 - i, i), A) is True
    assert model.win_line() == WinLine(Direction.D, Position(0, SIZE - 1))
    assert model.winner() is A