"""The four ruler statistics.

Every query is a pure read over an already-validated ruler set: no
query mutates its input or keeps state between calls, so they may run
in any order or concurrently.

Tie-breaks are explicit and first-seen: among equal candidates, the one
encountered first in iteration order wins. Nothing here sorts.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from reignstat.domain.errors import EmptyCollectionError
from reignstat.domain.rulers import Ruler


@dataclass(frozen=True)
class HouseScore:
    """Aggregated reign length of one house."""

    house: str | None
    score: int


@dataclass
class _HouseTotal:
    duration_sum: int = 0
    members: int = 0

    @property
    def score(self) -> int:
        # Consecutive rulers of one house share their hand-over year;
        # drop one year per member to avoid counting it twice.
        return self.duration_sum - self.members


def count_rulers(rulers: Sequence[Ruler]) -> int:
    """Number of rulers after dropping exact structural duplicates."""
    return len(set(rulers))


def most_used_first_name(rulers: Sequence[Ruler]) -> str:
    """The most frequent first name; earliest-seen name wins ties."""
    if not rulers:
        raise EmptyCollectionError("most used first name")
    counts = Counter(r.first_name for r in rulers)
    best_name, best_count = "", 0
    for name, count in counts.items():
        if count > best_count:
            best_name, best_count = name, count
    return best_name


def longest_ruling_monarch(rulers: Sequence[Ruler]) -> Ruler:
    """The ruler with the longest reign; earliest-seen wins ties."""
    if not rulers:
        raise EmptyCollectionError("longest ruling monarch")
    longest = rulers[0]
    for ruler in rulers[1:]:
        if ruler.duration > longest.duration:
            longest = ruler
    return longest


def house_totals(rulers: Sequence[Ruler]) -> dict[str | None, _HouseTotal]:
    """Running duration sum and member count per house, in first-seen order."""
    totals: dict[str | None, _HouseTotal] = {}
    for ruler in rulers:
        total = totals.setdefault(ruler.house, _HouseTotal())
        total.duration_sum += ruler.duration
        total.members += 1
    return totals


def longest_ruling_house(rulers: Sequence[Ruler]) -> HouseScore:
    """The house with the highest overlap-corrected reign total.

    ``score = sum(member durations) - member count``. The result is never
    floored: a lone member scores ``duration - 1`` and zero or negative
    winners are still returned. A later house must strictly beat the
    current maximum, so exact ties keep the earlier-seen house.
    """
    if not rulers:
        raise EmptyCollectionError("longest ruling house")
    best: HouseScore | None = None
    for house, total in house_totals(rulers).items():
        if best is None or total.score > best.score:
            best = HouseScore(house=house, score=total.score)
    assert best is not None
    return best
