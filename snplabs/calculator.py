"""Interactive calculator for bitwise AND, OR and XOR on unsigned integers."""

from __future__ import annotations

import argparse
import operator as _op
import re
import sys
from dataclasses import dataclass

from snplabs.bitops import format_binary

_BITS = 32
_MASK = (1 << _BITS) - 1
_SEPARATOR = "-" * 35

_OPERATIONS = {"&": _op.and_, "|": _op.or_, "^": _op.xor}

_DIGITS = {
    16: re.compile(r"[0-9a-fA-F]+"),
    8: re.compile(r"[0-7]+"),
    10: re.compile(r"[+-]?[0-9]+"),
}


@dataclass(frozen=True)
class Expression:
    """Two operands and the operator character combining them."""

    first: int
    second: int
    operator: str

    def evaluate(self) -> int:
        """Apply the operator; unknown operators yield 0."""
        operation = _OPERATIONS.get(self.operator)
        if operation is None:
            return 0
        return operation(self.first & _MASK, self.second & _MASK) & _MASK


def _scan(digits: str, base: int, text: str) -> int:
    match = _DIGITS[base].match(digits)
    if match is None:
        raise ValueError(f"invalid operand: {text!r}")
    return int(match.group(), base) & _MASK


def parse_operand(text: str) -> int:
    """Parse ``0x``-prefixed hex, ``0``-prefixed octal or plain decimal."""
    if text.startswith("0x"):
        return _scan(text[2:], 16, text)
    if text.startswith("0"):
        rest = text[1:]
        return _scan(rest, 8, text) if rest else 0
    return _scan(text, 10, text)


def _signed(value: int) -> int:
    value &= _MASK
    return value - (1 << _BITS) if value >> (_BITS - 1) else value


def format_bin(expression: Expression, result: int) -> str:
    """The operation written out in binary."""
    return (
        "Bin:\n"
        f"{format_binary(expression.first, _BITS)}\n"
        f"{expression.operator}\n"
        f"{format_binary(expression.second, _BITS)}\n"
        f"{_SEPARATOR}\n"
        f"{format_binary(result, _BITS)}\n"
        "\n"
    )


def format_hex(expression: Expression, result: int) -> str:
    """The operation written out in hexadecimal."""
    return (
        "Hex:\n"
        f"0x{expression.first & _MASK:02x} {expression.operator} "
        f"0x{expression.second & _MASK:02x} = 0x{result & _MASK:02x}\n"
        "\n"
    )


def format_dec(expression: Expression, result: int) -> str:
    """The operation written out in signed decimal."""
    return (
        "Dec:\n"
        f"{_signed(expression.first)} {expression.operator} "
        f"{_signed(expression.second)} = {_signed(result)}\n"
        "\n"
    )


def _read_expression(line: str) -> Expression:
    tokens = line.split()
    if len(tokens) < 3:
        raise ValueError("expected: <operand> <operator> <operand>")
    return Expression(parse_operand(tokens[0]), parse_operand(tokens[2]), tokens[1][0])


def main(argv: list[str] | None = None) -> int:
    """Read operations from standard input until the user quits."""
    argparse.ArgumentParser(description="Bitwise operation calculator.").parse_args(argv)
    stdin, stdout = sys.stdin, sys.stdout
    while True:
        stdout.write("Geben sie die Bit-Operation ein:\n")
        line = stdin.readline()
        if not line:
            break
        try:
            expression = _read_expression(line)
        except ValueError as error:
            sys.stderr.write(f"{error}\n")
        else:
            result = expression.evaluate()
            stdout.write(format_bin(expression, result))
            stdout.write(format_hex(expression, result))
            stdout.write(format_dec(expression, result))
        stdout.write("\nMöchten sie weiter machen oder abbrechen? [(n)ext|(q)uit] ")
        if not stdin.readline().startswith("n"):
            break
    stdout.write("Bye..\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())