# snplabs

A collection of small console programs: bit manipulation, a bitwise
calculator, terminal shapes, a right-angle checker, an include-graph
generator, word sorting, tic-tac-toe, a person register and a weekday
calculator.

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command               | What it does                                                              |
|-----------------------|---------------------------------------------------------------------------|
| `snp-bitops`          | Shows setting, clearing and toggling bits, an XOR swap, case conversion by bit masks and a power-of-two check |
| `snp-calculator`      | Reads expressions such as `0x0c ^ 0x0f` and prints the result in binary, hex and decimal |
| `snp-shapes`          | Asks for a shape, a size and a colour and draws it in the terminal         |
| `snp-triangle`        | Reads three side lengths again and again and reports whether the triangle is right-angled |
| `dep2dot`             | Turns the include tree printed by `gcc -H` into a Graphviz DOT graph        |
| `snp-sortwords`       | Reads up to ten words, drops duplicates (ignoring case) and prints them sorted |
| `tic-tac-toe`         | Two-player tic-tac-toe in the terminal                                     |
| `personen-verwaltung` | A sorted register of persons with insert, remove, show and clear           |
| `weekday`             | Prints the weekday of a Gregorian date                                     |

### Bit operations

`snp-bitops` runs all demonstrations; give one of `bits`, `swap`, `case`
or `powers` to run only that one.

### Calculator

`snp-calculator` reads a line such as `12 ^ 0x0f` (operands in decimal,
`0x` hexadecimal or `0`-prefixed octal; operators `&`, `|` and `^`) and
prints the operation in binary, hexadecimal and decimal. Answer a line
starting with `n` to enter another operation; anything else quits.

### Shapes

`snp-shapes` asks for a shape (0 oval, 1 rectangle), a size and a colour
(0 red, 1 green, 2 yellow, anything else white) and draws the shape with
ANSI colour codes.

### Triangle

`snp-triangle` asks for sides `a`, `b` and `c` (whole numbers up to 1000).
A line that is not such a number is asked for again; the program ends at
the end of input.

### Include graphs

```
gcc -H -c file.c 2>file.dep
dep2dot file.c <file.dep >file.dot
dot -Tpng file.dot >file.png
```

`dep2dot` needs the name of the root file as its argument; it reads only
the lines of the listing that start with a dot. Files are grouped into one
cluster per directory, and directories below `/usr/` are shaded. It
supports at most 64 directories and 256 files.

### Sorting words

`snp-sortwords` takes the first word of each input line until ten unique
words are entered, the word `ZZZ` is given or the input ends. Words are
cut to 20 characters and converted to upper case before comparison.

### Tic-tac-toe

Press `1` to `9` to play a field and `0` to quit. On an interactive terminal
keys take effect immediately without pressing Enter; this raw keyboard mode
uses `termios` and so needs a POSIX system.

### Person register

Choose `I`(nsert), `R`(emove), `S`(how), `C`(lear) or `E`(nd). A person has
a name and a first name (each 1 to 18 characters) and a non-negative age;
persons are kept sorted by name, first name and age, and an identical person
cannot be added twice. The register lives in memory only and is lost when
the program ends.

### Weekday

```
$ weekday 1582-10-15
1582-10-15 is a Fri
```

The date must be given as `YYYY-MM-DD` and must fall on or after the start
of the Gregorian calendar (1582-10-15). An invalid or missing date ends the
command with exit status 1.

## Using the modules

The building blocks behind the commands can be imported, for example
`snplabs.weekday.parse_date`, `snplabs.rectang.is_rectangular`,
`snplabs.depdata.read_all` with `snplabs.depdot.render_dot`,
`snplabs.ttt_model.Model`, `snplabs.ttt_control.Control` and
`snplabs.personlist.PersonList`.

## What it does not do

`dep2dot` neither runs the compiler nor Graphviz; it only converts a listing
that is already there into DOT text.