"""Ruler value type.

INVARIANT: A Ruler is never mutated after construction. Derived year
fields are computed from ``years`` on first access and memoized.
Structural validity is checked by :mod:`reignstat.domain.validation`,
not here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

from reignstat.domain.years import Clock, YearRange, YearRangeParser, calendar_year


def first_name_of(name: str) -> str:
    """Return the part of *name* before the first space.

    Examples:
        >>> first_name_of("Richard the Braveheart")
        'Richard'
        >>> first_name_of("Athelstan")
        'Athelstan'
    """
    return name.split(" ", 1)[0]


@dataclass(frozen=True)
class Ruler:
    """A single historical ruler record.

    Attributes:
        id: Record identifier, expected to be unique and >= 1.
        name: Full name, e.g. ``"Edward the Elder"``. None when the
            source omits it or sends null; validation reports it.
        house: Ruling house, None under the same conditions.
        years: Raw reign period, e.g. ``"899-925"`` or ``"1952-"``.
        country: Optional country, never validated.
        clock: Current-year provider for open ranges. Excluded from
            equality and hashing.
    """

    id: int
    name: str | None
    house: str | None
    years: str | None
    country: str | None = None
    clock: Clock = field(default=calendar_year, compare=False, repr=False)

    @cached_property
    def reign(self) -> YearRange:
        return YearRangeParser(self.clock).parse(self.years)

    @property
    def first_name(self) -> str:
        return first_name_of(self.name or "")

    @property
    def start_year(self) -> int:
        return self.reign.start

    @property
    def end_year(self) -> int:
        return self.reign.end

    @property
    def duration(self) -> int:
        return self.reign.duration
