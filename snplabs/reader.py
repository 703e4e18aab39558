"""Read a single non-negative integer per line, as typed by a user."""

from __future__ import annotations

from typing import TextIO

BUFFER_SIZE = 10
_BLANKS = "".join(chr(code) for code in range(33))


class ParseError(ValueError):
    """The line does not hold exactly one number within range."""


class ReadError(EOFError):
    """The input ended before a complete line was read."""


def parse_int(line: str, max_result: int) -> int:
    """Parse a line holding one unsigned number with optional blanks around it."""
    if len(line) > BUFFER_SIZE:
        raise ParseError(f"line longer than {BUFFER_SIZE} characters")
    text = line.strip(_BLANKS)
    if not text or not all("0" <= char <= "9" for char in text):
        raise ParseError(f"not a number: {line!r}")
    result = 0
    for char in text:
        result = result * 10 + ord(char) - ord("0")
        if result > max_result:
            raise ParseError(f"number exceeds {max_result}")
    return result


def read_int(stream: TextIO, max_result: int) -> int:
    """Read one line from ``stream`` and parse it; a line without newline is end of input."""
    line = stream.readline()
    if not line.endswith("\n"):
        raise ReadError("end of input")
    return parse_int(line[:-1], max_result)