"""Draw coloured rectangles and circles made of asterisks in the terminal."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, TypeVar

RESET = "\x1b[0m"

T = TypeVar("T")


class Shape(Enum):
    OVAL = 0
    RECTANGLE = 1


class Color(Enum):
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    WHITE = "\x1b[37m"


_COLOR_CHOICES = {0: Color.RED, 1: Color.GREEN, 2: Color.YELLOW}


@dataclass(frozen=True)
class Graphic:
    """A shape of a given size and colour."""

    shape: Shape
    size: int
    color: Color = Color.WHITE

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must not be negative")

    def _filled(self, row: int, col: int, radius: float) -> bool:
        if self.shape is Shape.RECTANGLE:
            return True
        return abs(math.hypot(row - radius, col - radius) - radius) < 0.5

    def render(self) -> str:
        """Return the drawing as text with ANSI colour codes."""
        radius = self.size / 2
        star = f"{self.color.value}*{RESET}"
        span = range(self.size + 1)
        return "".join(
            "".join(star if self._filled(row, col, radius) else " " for col in span) + "\n"
            for row in span
        )


def _ask(stdin, stdout, prompt: str, convert: Callable[[int], T]) -> T | None:
    while True:
        stdout.write(prompt)
        line = stdin.readline()
        if not line:
            return None
        tokens = line.split()
        if not tokens:
            continue
        try:
            return convert(int(tokens[0]))
        except ValueError:
            sys.stderr.write(f"invalid input: {tokens[0]}\n")


def _size(value: int) -> int:
    if value < 0:
        raise ValueError("negative size")
    return value


def main(argv: list[str] | None = None) -> int:
    """Prompt for shapes and draw them until the user quits."""
    argparse.ArgumentParser(description="Draw simple shapes.").parse_args(argv)
    stdin, stdout = sys.stdin, sys.stdout
    while True:
        shape = _ask(stdin, stdout, "Geben Sie die gewünschte Form an [OVAL=0 | RECTANGLE=1]: ", Shape)
        if shape is None:
            break
        size = _ask(stdin, stdout, "Geben Sie die gewünschte Grösse an: ", _size)
        if size is None:
            break
        color = _ask(
            stdin,
            stdout,
            "Geben Sie die Farb an [RED=0 | GREEN=1 | YELLOW=2]: ",
            lambda value: _COLOR_CHOICES.get(value, Color.WHITE),
        )
        if color is None:
            break
        stdout.write(Graphic(shape, size, color).render())
        stdout.write("\nMöchten sie weiter machen oder abbrechen? [(n)ext|(q)uit] ")
        if not stdin.readline().startswith("n"):
            break
    stdout.write("Byebye..\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())