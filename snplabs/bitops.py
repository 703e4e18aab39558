"""Single-bit manipulation helpers and the small demonstrations built on them."""

from __future__ import annotations

import argparse
import sys

_DEMO_WORD = "sREedEv"
_UPPER_MASK = ord("_")
_LOWER_MASK = ord(" ")


def format_binary(value: int, width: int = 32) -> str:
    """Render the lowest ``width`` bits of ``value``, with a ``'`` after each byte."""
    digits = format(value & ((1 << width) - 1), f"0{width}b") if width > 0 else ""
    parts = []
    for position, digit in enumerate(digits):
        parts.append(digit)
        if (width - 1 - position) % 8 == 0:
            parts.append("'")
    return "".join(parts)


def set_bit(number: int, bit: int) -> int:
    """Return ``number`` with ``bit`` set."""
    return number | (1 << bit)


def clear_bit(number: int, bit: int) -> int:
    """Return ``number`` with ``bit`` cleared."""
    return number & ~(1 << bit)


def toggle_bit(number: int, bit: int) -> int:
    """Return ``number`` with ``bit`` inverted."""
    return number ^ (1 << bit)


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Swap two integers using exclusive-or only."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def _check_char(char: str) -> int:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return ord(char)


def to_upper(char: str) -> str:
    """Upper-case an ASCII letter by clearing bit 5."""
    return chr(_check_char(char) & _UPPER_MASK)


def to_lower(char: str) -> str:
    """Lower-case an ASCII letter by setting bit 5."""
    return chr(_check_char(char) | _LOWER_MASK)


def is_power(number: int) -> bool:
    """True if at most one bit of ``number`` is set (zero included)."""
    return (number & (number - 1)) == 0


def _bits_demo() -> str:
    number = 0x75
    lines = [f"Initial number = 0x{number:02X}", format_binary(number, 16), ""]
    bit = 3
    number = set_bit(number, bit)
    lines += [f"Setting bit {bit}, number = 0x{number:02X}", format_binary(number, 16), ""]
    bit = 1
    number = clear_bit(number, bit)
    lines += [f"Clearing bit {bit}, number = 0x{number:02X}", format_binary(number, 16), ""]
    bit = 0
    number = toggle_bit(number, bit)
    lines.append(f"Toggling bit {bit}, number = 0x{number:02X}")
    return "\n".join(lines) + "\n"


def _swap_demo() -> str:
    a, b = 3, 4
    before = f"a: {a}; b: {b}\n"
    a, b = xor_swap(a, b)
    return before + f"a: {a}; b: {b}\n"


def _case_demo() -> str:
    lines = [f"Original word: {_DEMO_WORD}"]
    for char in _DEMO_WORD:
        lines.append(f"UPPERCASE: {to_upper(char)}")
        lines.append(f"LOWERCASE: {to_lower(char)}")
    return "\n".join(lines) + "\n"


def _powers_demo() -> str:
    return "".join(
        f"{i} is a power of 2\n" if i > 0 and is_power(i) else "--\n" for i in range(1, 71)
    )


_DEMOS = {
    "bits": _bits_demo,
    "swap": _swap_demo,
    "case": _case_demo,
    "powers": _powers_demo,
}


def main(argv: list[str] | None = None) -> int:
    """Run one or all of the bit-operation demonstrations."""
    parser = argparse.ArgumentParser(description="Bit operation demonstrations.")
    parser.add_argument("demo", nargs="?", choices=sorted(_DEMOS), help="demo to run (default: all)")
    args = parser.parse_args(argv)
    names = [args.demo] if args.demo else list(_DEMOS)
    for name in names:
        sys.stdout.write(_DEMOS[name]())
    return 0


if __name__ == "__main__":
    sys.exit(main())