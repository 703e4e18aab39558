"""Interactive loop asking for triangle sides and reporting right angles."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from snplabs.reader import ParseError, ReadError, read_int
from snplabs.rectang import is_rectangular

MAX_NUMBER = 1000


def _ask_side(name: str, stdin: TextIO, stdout: TextIO) -> int:
    while True:
        stdout.write(f"Seite {name}: ")
        try:
            return read_int(stdin, MAX_NUMBER)
        except ParseError:
            continue


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Classify triangles read from ``stdin`` until the input ends."""
    try:
        while True:
            stdout.write("\nDreiecksbestimmung (CTRL-C: Abbruch)\n\n")
            a = _ask_side("a", stdin, stdout)
            b = _ask_side("b", stdin, stdout)
            c = _ask_side("c", stdin, stdout)
            verdict = "ist rechtwinklig" if is_rectangular(a, b, c) else "ist nicht rechtwinklig"
            stdout.write(f"-> Dreieck {a}-{b}-{c} {verdict}\n")
            stdout.write("\n\n")
    except ReadError:
        pass
    stdout.write("\n\nbye bye\n\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the triangle dialogue on standard input and output."""
    argparse.ArgumentParser(description="Check triangles for a right angle.").parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())