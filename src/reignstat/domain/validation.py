"""Structural validation of a ruler set.

Every rule runs over the whole collection; failures are collected and
raised together so one run reports every offending id per rule.
Validation never repairs or filters its input.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence

from reignstat.domain.errors import EmptyInputError, ValidationError, ViolationKind
from reignstat.domain.rulers import Ruler
from reignstat.domain.years import DEGENERATE


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _invalid_ids(rulers: Sequence[Ruler]) -> list[int]:
    return [r.id for r in rulers if r.id < 1]


def _duplicate_ids(rulers: Sequence[Ruler]) -> list[int]:
    counts = Counter(r.id for r in rulers)
    # Counter keeps first-seen order, so each duplicate is listed once.
    return [rid for rid, n in counts.items() if n > 1]


def _empty_names(rulers: Sequence[Ruler]) -> list[int]:
    return [r.id for r in rulers if _is_blank(r.name) or _is_blank(r.first_name)]


def _empty_houses(rulers: Sequence[Ruler]) -> list[int]:
    return [r.id for r in rulers if _is_blank(r.house)]


def _wrong_years(rulers: Sequence[Ruler]) -> list[int]:
    # An unparseable period degrades to 0-0, which is inclusive and so
    # would otherwise pass the duration rule.
    return [r.id for r in rulers if r.start_year > r.end_year or r.reign == DEGENERATE]


def _invalid_durations(rulers: Sequence[Ruler]) -> list[int]:
    return [r.id for r in rulers if r.duration < 1]


RULES: dict[ViolationKind, Callable[[Sequence[Ruler]], list[int]]] = {
    ViolationKind.INVALID_ID: _invalid_ids,
    ViolationKind.DUPLICATE_ID: _duplicate_ids,
    ViolationKind.EMPTY_NAME: _empty_names,
    ViolationKind.EMPTY_HOUSE: _empty_houses,
    ViolationKind.WRONG_YEARS: _wrong_years,
    ViolationKind.INVALID_DURATION: _invalid_durations,
}


def find_violations(rulers: Sequence[Ruler]) -> dict[ViolationKind, list[int]]:
    """Run every rule and return offending ids for the rules that failed."""
    violations: dict[ViolationKind, list[int]] = {}
    for kind, rule in RULES.items():
        offenders = rule(rulers)
        if offenders:
            violations[kind] = offenders
    return violations


def validate_rulers(rulers: Sequence[Ruler] | None) -> None:
    """Raise if *rulers* is absent or structurally invalid.

    Raises:
        EmptyInputError: *rulers* is None. An empty sequence is valid.
        ValidationError: At least one rule failed; carries all of them.
    """
    if rulers is None:
        raise EmptyInputError
    violations = find_violations(rulers)
    if violations:
        raise ValidationError(violations)
