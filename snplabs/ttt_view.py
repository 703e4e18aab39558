"""Terminal user interface for tic-tac-toe, drawn with ANSI escape sequences."""

from __future__ import annotations

import argparse
import io
import sys
from typing import Iterable, Iterator, TextIO

from snplabs.ttt_control import CELLS, Control, Player
from snplabs.ttt_model import SIZE, Model

EXIT = "0"

CLS = "\033[2J"
AVAILABLE = "\033[40m"
PLAYER_A = "\033[42m"
PLAYER_B = "\033[41m"
GAP = "\033[47m"
RESET = "\033[0m"

CELL_WIDTH = 10
CELL_HEIGHT = 5
GAP_WIDTH = 4
GAP_HEIGHT = 2

_CELL_COLORS = {Player.A: PLAYER_A, Player.B: PLAYER_B}
_PLAYER_LABELS = {
    Player.A: f"{PLAYER_A}Player A{RESET}",
    Player.B: f"{PLAYER_B}Player B{RESET}",
}


def _goto(row: int, col: int) -> str:
    return f"\033[{row};{col}H"


class _Screen:
    """Collects the escape sequences and text that make up one frame."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str) -> None:
        self._parts.append(text)

    def text(self) -> str:
        return "".join(self._parts)

    def bar(self, row: int, col: int, width: int, color: str) -> int:
        self.write(f"{_goto(row, col)}{color}{' ' * width}{RESET}")
        return col + width

    def h_gap(self, row: int, col: int) -> int:
        for offset in range(GAP_HEIGHT):
            self.bar(row + offset, col, GAP_WIDTH + CELL_WIDTH + GAP_WIDTH, GAP)
        return row + GAP_HEIGHT

    def cell_number(self, y: int, x: int, number: int, color: str) -> None:
        cy = (y + y + CELL_HEIGHT) // 2
        cx = (x + x + CELL_WIDTH - 2) // 2
        self.write(f"{_goto(cy, cx)}{color}{number:2d}{RESET}")

    def cell(self, index: int, color: str) -> None:
        y = 1 + index // SIZE * (GAP_HEIGHT + CELL_HEIGHT)
        x = 1 + index % SIZE * (GAP_WIDTH + CELL_WIDTH)
        row = self.h_gap(y, x)
        for _ in range(CELL_HEIGHT):
            col = self.bar(row, x, GAP_WIDTH, GAP)
            col = self.bar(row, col, CELL_WIDTH, color)
            self.bar(row, col, GAP_WIDTH, GAP)
            row += 1
        row = self.h_gap(row, x)
        self.cell_number(y + GAP_HEIGHT, x + GAP_WIDTH, index + 1, color)
        self.write(_goto(row, 0))

    def player(self, row: int, col: int, label: str, player: Player) -> None:
        self.write(f"{_goto(row, col)}{RESET}{label}")
        self.write(_goto(row, col + len(label)))
        self.write(_PLAYER_LABELS.get(player, f"{RESET}none"))

    def status(self, winner: Player, upcoming: Player) -> None:
        row = GAP_HEIGHT
        col = SIZE * (GAP_WIDTH + CELL_WIDTH) + GAP_WIDTH + GAP_WIDTH
        self.player(row, col, "Winner is:      ", winner)
        row += 2
        self.player(row, col, "Next player is: ", upcoming)
        row += 4
        self.write(f"{_goto(row, col)}0:    exit")
        row += 2
        self.write(f"{_goto(row, col)}1..9: play field")


class View:
    """Draws the board held by a control and feeds key presses to it."""

    def __init__(self, control: Control | None = None) -> None:
        self.control = control if control is not None else Control(Model())

    def render(self) -> str:
        """One complete frame: cleared screen, status panel and all cells."""
        screen = _Screen()
        screen.write(CLS + "\n")
        screen.status(self.control.winner(), self.control.player)
        for index in range(CELLS):
            color = _CELL_COLORS.get(self.control.state(index + 1), AVAILABLE)
            screen.cell(index, color)
        return screen.text()

    def process(self, chars: Iterable[str], out: TextIO) -> bool:
        """Draw, then play each digit key and redraw; return True if the exit key was hit."""
        out.write(self.render())
        for char in chars:
            if char == EXIT:
                return True
            if "0" <= char <= "9":
                self.control.move(int(char))
            out.write(self.render())
            out.flush()
        return False

    def run(self, stdin: TextIO, stdout: TextIO) -> None:
        """Run the key loop; an interactive terminal is switched to raw mode meanwhile."""
        fd = _terminal_fd(stdin)
        if fd is None:
            self.process(_chars(stdin), stdout)
            return
        import termios
        import tty

        original = termios.tcgetattr(fd)
        try:
            tty.setraw(fd, termios.TCSANOW)
            self.process(_chars(stdin), stdout)
        finally:
            termios.tcsetattr(fd, termios.TCSANOW, original)


def _terminal_fd(stream: TextIO) -> int | None:
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, io.UnsupportedOperation):
        return None
    return fd if stream.isatty() else None


def _chars(stream: TextIO) -> Iterator[str]:
    return iter(lambda: stream.read(1), "")


def main(argv: list[str] | None = None) -> int:
    """Play tic-tac-toe on standard input and output."""
    argparse.ArgumentParser(description="Tic-tac-toe in the terminal.").parse_args(argv)
    View(Control(Model())).run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())