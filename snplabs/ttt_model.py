"""The tic-tac-toe board: field states, moves and detection of a winning line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

SIZE = 3


class State(Enum):
    """The state of one field."""

    NONE = 0
    A = 1
    B = 2


class Direction(Enum):
    """Direction of a winning line."""

    NONE = 0
    H = 1
    V = 2
    D = 3


@dataclass(frozen=True)
class Position:
    """A 0-based field position on the board."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < SIZE and 0 <= self.col < SIZE):
            raise ValueError(f"position out of range: {self.row}/{self.col}")


@dataclass(frozen=True)
class WinLine:
    """A winning line given by its direction and start position.

    The start is row/0 for horizontal, 0/col for vertical and 0/0 or 0/2 for
    diagonal lines.
    """

    dir: Direction
    start: Position


_NO_WIN = WinLine(Direction.NONE, Position(0, 0))


class Model:
    """A 3x3 board of field states."""

    def __init__(self) -> None:
        self.board: list[list[State]] = [[State.NONE] * SIZE for _ in range(SIZE)]

    @classmethod
    def from_board(cls, board: Iterable[Iterable[State]]) -> Model:
        """Create a model holding a copy of the given 3x3 board."""
        rows = [list(row) for row in board]
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"board must be {SIZE}x{SIZE}")
        if any(not isinstance(state, State) for row in rows for state in row):
            raise TypeError("board fields must be State values")
        model = cls()
        model.board = rows
        return model

    def get_state(self, pos: Position) -> State:
        """The state of the field at ``pos``."""
        return self.board[pos.row][pos.col]

    def _line(self, cells: Iterable[tuple[int, int]]) -> bool:
        states = {self.board[row][col] for row, col in cells}
        return len(states) == 1 and State.NONE not in states

    def win_line(self) -> WinLine:
        """The first winning line found, or a line with direction NONE."""
        for row in range(SIZE):
            if self._line((row, col) for col in range(SIZE)):
                return WinLine(Direction.H, Position(row, 0))
        for col in range(SIZE):
            if self._line((row, col) for row in range(SIZE)):
                return WinLine(Direction.V, Position(0, col))
        if self._line((i, i) for i in range(SIZE)):
            return WinLine(Direction.D, Position(0, 0))
        if self._line((SIZE - 1 - i, i) for i in range(SIZE)):
            return WinLine(Direction.D, Position(0, SIZE - 1))
        return _NO_WIN

    def winner(self) -> State:
        """The winning state, or NONE if nobody has won (yet)."""
        line = self.win_line()
        if line.dir is Direction.NONE:
            return State.NONE
        return self.get_state(line.start)

    def can_move(self) -> bool:
        """True while nobody has won and some field is still free."""
        if self.winner() is not State.NONE:
            return False
        return any(state is State.NONE for row in self.board for state in row)

    def move(self, pos: Position, state: State) -> bool:
        """Play ``state`` at ``pos`` if the field is free and the game goes on."""
        if self.get_state(pos) is State.NONE and self.can_move():
            self.board[pos.row][pos.col] = state
            return True
        return False