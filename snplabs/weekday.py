"""Validate a Gregorian calendar date and report its day of the week."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from enum import IntEnum

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

_DATE = re.compile(r"\s*([+-]?\d+)-([+-]?\d+)-([+-]?\d+)\s*")
_USAGE = "usage: weekday YYYY-MM-DD\n"

# Month offsets for the day-of-week computation, January first.
_MONTH_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)


class Month(IntEnum):
    """Months of the year, January being 1."""

    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12


class Weekday(IntEnum):
    """Days of the week, Sunday being 0."""

    SUN = 0
    MON = 1
    TUE = 2
    WED = 3
    THU = 4
    FRI = 5
    SAT = 6

    def __str__(self) -> str:
        return self.name.title()


_THIRTY_DAYS = {Month.APR, Month.JUN, Month.SEP, Month.NOV}
_GREGORIAN_START = (1582, Month.OCT, 15)


def is_leap_year(year: int) -> bool:
    """True for Gregorian leap years."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def month_length(year: int, month: int) -> int:
    """Number of days of ``month`` in ``year``; ValueError for a month outside 1..12."""
    month = Month(month)
    if month is Month.FEB:
        return 29 if is_leap_year(year) else 28
    return 30 if month in _THIRTY_DAYS else 31


@dataclass(frozen=True)
class Date:
    """A calendar date; the fields are not checked until asked."""

    year: int
    month: int
    day: int

    def is_gregorian(self) -> bool:
        """True from 1582-10-15, the first day of the Gregorian calendar, onwards."""
        return (self.year, self.month, self.day) >= _GREGORIAN_START

    def is_valid(self) -> bool:
        """True if the date exists in the Gregorian calendar."""
        if not 1 <= self.month <= 12:
            return False
        if not 1 <= self.day <= month_length(self.year, self.month):
            return False
        return self.is_gregorian()

    def weekday(self) -> Weekday:
        """The day of the week of a valid date."""
        if not self.is_valid():
            raise ValueError(f"not a valid Gregorian date: {self}")
        year = self.year - 1 if self.month < Month.MAR else self.year
        total = (
            year
            + year // 4
            - year // 100
            + year // 400
            + _MONTH_OFFSETS[self.month - 1]
            + self.day
        )
        return Weekday(total % 7)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def parse_date(text: str) -> Date:
    """Parse ``YYYY-MM-DD`` into a Date; ValueError if the text has another form."""
    match = _DATE.fullmatch(text)
    if match is None:
        raise ValueError(f"not a date of the form YYYY-MM-DD: {text!r}")
    year, month, day = (int(group) for group in match.groups())
    return Date(year, month, day)


def main(argv: list[str] | None = None) -> int:
    """Print the weekday of the date given as the first argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write(f"ERROR: missing argument\n{_USAGE}")
        return EXIT_FAILURE
    try:
        date = parse_date(args[0])
    except ValueError as error:
        sys.stderr.write(f"ERROR: {error}\n")
        return EXIT_FAILURE
    if not date.is_valid():
        sys.stderr.write(f"ERROR: invalid date: {args[0]}\n")
        return EXIT_FAILURE
    sys.stdout.write(f"{date} is a {date.weekday()}\n")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())