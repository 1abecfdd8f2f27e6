"""Year-range parsing for free-text reign periods.

Three textual shapes are accepted, anchored to the whole string:

- ``NNNN-MMMM`` — closed range.
- ``NNNN-``     — open range, ends in the current year.
- ``NNNN``      — single year.

Anything else degrades to the ``(0, 0)`` pair. Parsing never raises;
malformed input is reported later by validation.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date
from typing import NamedTuple

YEARS_PATTERN: re.Pattern[str] = re.compile(
    r"^(?P<start>\d{3,4})(?P<dash>-)?(?P<end>\d{3,4})?$"
)

Clock = Callable[[], int]


def calendar_year() -> int:
    """The current calendar year from the system clock."""
    return date.today().year


def fixed_year(year: int) -> Clock:
    """Return a clock that always reports *year*."""

    def clock() -> int:
        return year

    return clock


class YearRange(NamedTuple):
    """Inclusive reign period."""

    start: int
    end: int

    @property
    def duration(self) -> int:
        """Number of years covered, counting both ends."""
        return self.end - self.start + 1


DEGENERATE = YearRange(0, 0)


def parse_years(raw: str | None, *, current_year: int) -> YearRange:
    """Parse a reign period into a :class:`YearRange`.

    Examples:
        >>> parse_years("1050-1060", current_year=2024)
        YearRange(start=1050, end=1060)
        >>> parse_years("1952-", current_year=2024)
        YearRange(start=1952, end=2024)
        >>> parse_years("1975", current_year=2024)
        YearRange(start=1975, end=1975)
        >>> parse_years("soon", current_year=2024)
        YearRange(start=0, end=0)
    """
    if raw is None:
        return DEGENERATE
    match = YEARS_PATTERN.match(raw)
    if match is None:
        return DEGENERATE

    start = int(match.group("start"))
    if match.group("end") is not None:
        return YearRange(start, int(match.group("end")))
    if match.group("dash") is not None:
        return YearRange(start, current_year)
    return YearRange(start, start)


def is_open_range(raw: str | None) -> bool:
    """True when *raw* is a well-formed ``NNNN-`` range with no end year."""
    if raw is None:
        return False
    match = YEARS_PATTERN.match(raw)
    return match is not None and match.group("dash") is not None and match.group("end") is None


class YearRangeParser:
    """Parser bound to an injected current-year clock.

    The clock is read at call time; only open ranges use its value.
    """

    def __init__(self, clock: Clock = calendar_year) -> None:
        self._clock = clock

    def parse(self, raw: str | None) -> YearRange:
        return parse_years(raw, current_year=self._clock())
