"""Game control between the tic-tac-toe board and its user interface."""

from __future__ import annotations

from enum import Enum

from snplabs.ttt_model import SIZE, Direction, Model, Position, State

CELLS = SIZE * SIZE


class Player(Enum):
    """The players of the game."""

    NONE = 0
    A = 1
    B = 2


_TO_STATE = {Player.A: State.A, Player.B: State.B}
_TO_PLAYER = {State.A: Player.A, State.B: Player.B}
_NEXT = {Player.A: Player.B, Player.B: Player.A}


def _position(cell: int) -> Position:
    if not 1 <= cell <= CELLS:
        raise ValueError(f"cell must be in 1..{CELLS}, got {cell}")
    row, col = divmod(cell - 1, SIZE)
    return Position(row, col)


def _cell(pos: Position) -> int:
    return 1 + pos.row * SIZE + pos.col


def _player(state: State) -> Player:
    return _TO_PLAYER.get(state, Player.NONE)


class Control:
    """Tracks whose turn it is and maps cells 1..9 onto the board."""

    def __init__(self, model: Model | None = None) -> None:
        self.model = model if model is not None else Model()
        self.player = Player.A

    def move(self, cell: int) -> None:
        """Play ``cell`` for the current player; moves that are not allowed are ignored."""
        state = _TO_STATE.get(self.player, State.NONE)
        if self.model.move(_position(cell), state):
            if self.model.can_move():
                self.player = _NEXT.get(self.player, self.player)
            else:
                self.player = Player.NONE

    def winner(self) -> Player:
        """The winning player, if any."""
        return _player(self.model.winner())

    def state(self, cell: int) -> Player:
        """The player who has played ``cell``, if any."""
        return _player(self.model.get_state(_position(cell)))

    def win_cells(self) -> tuple[int, int, int] | None:
        """The winning cells in increasing order, or None while nobody has won."""
        if self.winner() is Player.NONE:
            return None
        line = self.model.win_line()
        start = _cell(line.start)
        if line.dir is Direction.H:
            return (start, start + 1, start + 2)
        if line.dir is Direction.V:
            return (start, start + 3, start + 6)
        if start == 1:
            return (start, start + 4, start + 8)
        return (start, start + 2, start + 4)