"""Collect unique upper-cased words from the user and print them sorted."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, TextIO

MAX_WORDS = 10
MAX_WORD_LENGTH = 20
TERMINATOR = "ZZZ"

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def _to_upper(word: str) -> str:
    return word.translate(_ASCII_UPPER)


def read_words(tokens: Iterable[str], out: TextIO) -> list[str]:
    """Take up to ``MAX_WORDS`` unique upper-cased words until the terminator or input ends."""
    words: list[str] = []
    source = iter(tokens)
    while len(words) < MAX_WORDS:
        out.write(f"{len(words) + 1}> ")
        token = next(source, None)
        if token is None:
            sys.stderr.write("Error reading input. Stopping.\n")
            break
        token = token[:MAX_WORD_LENGTH]
        if token == TERMINATOR:
            out.write(f"Termination signal '{TERMINATOR}' received.\n")
            break
        word = _to_upper(token)
        if word in words:
            out.write(f"'{word}' is a duplicate, ignoring.\n")
        else:
            words.append(word)
    if len(words) == MAX_WORDS:
        out.write(f"Maximum number of unique words ({MAX_WORDS}) reached.\n")
    return words


def sort_words(words: Iterable[str]) -> list[str]:
    """Return the words in ascending order."""
    return sorted(words)


def format_words(words: Iterable[str]) -> str:
    """The framed listing of the words, one per line."""
    body = "".join(f"{word}\n" for word in words)
    return f"\n===== Sorted Unique Words =====\n{body}=============================\n"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        parts = line.split()
        if parts:
            yield parts[0]


def main(argv: list[str] | None = None) -> int:
    """Read words from standard input and print them sorted."""
    argparse.ArgumentParser(description="Sort unique words.").parse_args(argv)
    stdout = sys.stdout
    stdout.write(f"Enter up to {MAX_WORDS} unique words (max {MAX_WORD_LENGTH} chars each).\n")
    stdout.write(f"Enter '{TERMINATOR}' to finish early.\n")
    words = read_words(_tokens(sys.stdin), stdout)
    if words:
        stdout.write(format_words(sort_words(words)))
    else:
        stdout.write("\nNo words were entered.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())