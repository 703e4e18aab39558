import pytest

from snplabs.bitops import (
    clear_bit,
    format_binary,
    is_power,
    main,
    set_bit,
    to_lower,
    to_upper,
    toggle_bit,
    xor_swap,
)


def test_format_binary_pinned():
    assert format_binary(0x75, 16) == "00000000'01110101'"


@pytest.mark.parametrize("value", [0, 1, 0x75, 0xFF, 0x1234, 0xFFFF])
@pytest.mark.parametrize("width", [16, 32])
def test_format_binary_roundtrip(value, width):
    text = format_binary(value, width)
    assert int(text.replace("'", ""), 2) == value
    assert text.count("'") == width // 8
    assert len(text) == width + width // 8


@pytest.mark.parametrize("number", [0, 0x75, 0x7D, 0xFFFF])
@pytest.mark.parametrize("bit", [0, 1, 3, 7, 15])
def test_bit_operations(number, bit):
    assert (set_bit(number, bit) >> bit) & 1 == 1
    assert (clear_bit(number, bit) >> bit) & 1 == 0
    assert set_bit(number, bit) ^ number in (0, 1 << bit)
    assert clear_bit(number, bit) ^ number in (0, 1 << bit)
    assert toggle_bit(number, bit) ^ number == 1 << bit
    assert toggle_bit(toggle_bit(number, bit), bit) == number


@pytest.mark.parametrize("a,b", [(3, 4), (0, 7), (-5, 12), (100, 100)])
def test_xor_swap(a, b):
    assert xor_swap(a, b) == (b, a)


@pytest.mark.parametrize("char", list("sREedEv"))
def test_case_conversion(char):
    assert to_upper(char) == char.upper()
    assert to_lower(char) == char.lower()


def test_case_conversion_requires_single_char():
    with pytest.raises(ValueError):
        to_upper("ab")
    with pytest.raises(ValueError):
        to_lower("")


def test_is_power_matches_single_bit():
    for n in range(1, 200):
        assert is_power(n) == (bin(n).count("1") == 1)


def test_main_swap(capsys):
    assert main(["swap"]) == 0
    assert capsys.readouterr().out == "a: 3; b: 4\na: 4; b: 3\n"


def test_main_bits(capsys):
    assert main(["bits"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Initial number = 0x75"
    assert lines[-1] == "Toggling bit 0, number = 0x7C"


def test_main_powers(capsys):
    assert main(["powers"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 70
    assert all(line == "--" or line.endswith(" is a power of 2") for line in lines)
    powers = [int(line.split()[0]) for line in lines if line != "--"]
    assert all(is_power(p) for p in powers)


def test_main_case(capsys):
    assert main(["case"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Original word: sREedEv"
    assert len(lines) == 1 + 2 * 7