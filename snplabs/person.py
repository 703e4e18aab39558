"""Person records: ordering, display and reading them from a user."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TextIO

NAME_LEN = 20
AGE_BUFFER = 10
UINT_MAX = 2**32 - 1

_AGE = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")


class PersonInputError(ValueError):
    """The entered person data are missing, too long or malformed."""


def _sign(left, right) -> int:
    return (left > right) - (left < right)


@dataclass(frozen=True)
class Person:
    """A person identified by name, first name and age."""

    name: str
    first_name: str
    age: int

    def compare(self, other: Person) -> int:
        """Order by name, then first name, then age: -1, 0 or 1."""
        pairs = (
            (self.name[:NAME_LEN], other.name[:NAME_LEN]),
            (self.first_name[:NAME_LEN], other.first_name[:NAME_LEN]),
            (self.age, other.age),
        )
        for mine, theirs in pairs:
            result = _sign(mine, theirs)
            if result:
                return result
        return 0

    def format(self) -> str:
        """The person's fields, one indented line each."""
        return (
            f"  Name: {self.name}\n"
            f"  First name: {self.first_name}\n"
            f"  Age: {self.age}\n"
        )


def _read_line(stdin: TextIO, size: int) -> str:
    line = stdin.readline()
    if not line:
        raise PersonInputError("Error reading input.")
    if not line.endswith("\n") or len(line) > size - 1:
        raise PersonInputError(
            f"Error: Input too long (max {size - 2} characters allowed)."
        )
    text = line[:-1]
    if not text:
        raise PersonInputError("Error: Input cannot be empty.")
    return text


def _parse_age(text: str) -> int:
    match = _AGE.fullmatch(text)
    if match is None:
        raise PersonInputError("Error: Age must be a valid non-negative number.")
    value = int(match.group(2))
    if (match.group(1) == "-" and value) or value > UINT_MAX:
        raise PersonInputError("Error: Age is too large.")
    return value


def read_person(stdin: TextIO, stdout: TextIO) -> Person:
    """Prompt for name, first name and age and return the person entered."""
    stdout.write("  Name: ")
    name = _read_line(stdin, NAME_LEN)
    stdout.write("  First name: ")
    first_name = _read_line(stdin, NAME_LEN)
    stdout.write("  Age: ")
    age = _parse_age(_read_line(stdin, AGE_BUFFER))
    return Person(name, first_name, age)