import pytest

from snplabs.ttt_control import Control, Player
from snplabs.ttt_model import Model, Position, State


def play(cells):
    control = Control()
    for cell in cells:
        control.move(cell)
    return control


def test_initial_state():
    control = Control()
    assert control.player is Player.A
    assert control.winner() is Player.NONE
    assert control.win_cells() is None
    assert all(control.state(cell) is Player.NONE for cell in range(1, 10))


def test_players_alternate():
    control = play([1])
    assert control.player is Player.B
    assert control.state(1) is Player.A
    control.move(5)
    assert control.player is Player.A
    assert control.state(5) is Player.B


def test_cell_maps_onto_model_position():
    model = Model()
    control = Control(model)
    control.move(6)
    assert model.get_state(Position(1, 2)) is State.A


def test_occupied_cell_is_ignored():
    control = play([1, 1])
    assert control.player is Player.B
    assert control.state(1) is Player.A


@pytest.mark.parametrize("cell", [0, 10])
def test_invalid_cell(cell):
    with pytest.raises(ValueError):
        Control().move(cell)
    with pytest.raises(ValueError):
        Control().state(cell)


def test_row_win():
    control = play([1, 4, 2, 5, 3])
    assert control.winner() is Player.A
    assert control.player is Player.NONE
    assert control.win_cells() == (1, 2, 3)


def test_column_win():
    control = play([2, 1, 5, 3, 8])
    assert control.winner() is Player.A
    assert control.win_cells() == (2, 5, 8)


def test_diagonal_win():
    control = play([1, 2, 5, 3, 9])
    assert control.win_cells() == (1, 5, 9)


def test_anti_diagonal_win():
    control = play([3, 1, 5, 2, 7])
    assert control.win_cells() == (3, 5, 7)


def test_player_b_wins():
    control = play([1, 4, 2, 5, 9, 6])
    assert control.winner() is Player.B
    assert control.win_cells() == (4, 5, 6)


def test_moves_after_win_are_ignored():
    control = play([1, 4, 2, 5, 3, 9])
    assert control.state(9) is Player.NONE
    assert control.player is Player.NONE


def test_draw():
    control = play([1, 2, 3, 5, 4, 6, 8, 7, 9])
    assert control.winner() is Player.NONE
    assert control.player is Player.NONE
    assert control.win_cells() is None
    assert all(control.state(cell) is not Player.NONE for cell in range(1, 10))