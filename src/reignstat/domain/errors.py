"""Domain error hierarchy.

All errors are fail-fast: the domain never retries or partially
recovers. The service layer maps them onto ``ServiceError`` codes.
"""

from __future__ import annotations

from enum import StrEnum


class ReignError(Exception):
    """Base class for every error raised by reignstat."""

    code = "REIGN_ERROR"


class EmptyInputError(ReignError):
    """The ruler sequence itself is absent (not merely empty)."""

    code = "EMPTY_INPUT"

    def __init__(self, message: str = "Rulers collection is absent.") -> None:
        super().__init__(message)


class EmptyCollectionError(ReignError):
    """A statistic was requested over a zero-length ruler set."""

    code = "EMPTY_COLLECTION"

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"Cannot compute {query} over an empty rulers collection.")


class ViolationKind(StrEnum):
    """Structural rules checked by validation, in reporting order."""

    INVALID_ID = "invalid_id"
    DUPLICATE_ID = "duplicate_id"
    EMPTY_NAME = "empty_name"
    EMPTY_HOUSE = "empty_house"
    WRONG_YEARS = "wrong_years"
    INVALID_DURATION = "invalid_duration"


VIOLATION_MESSAGES: dict[ViolationKind, str] = {
    ViolationKind.INVALID_ID: "Invalid IDs",
    ViolationKind.DUPLICATE_ID: "Duplicated IDs",
    ViolationKind.EMPTY_NAME: "Empty name",
    ViolationKind.EMPTY_HOUSE: "Empty house",
    ViolationKind.WRONG_YEARS: "Wrong years",
    ViolationKind.INVALID_DURATION: "Invalid ruling duration",
}


class ValidationError(ReignError):
    """One or more structural rules were violated.

    Attributes:
        violations: Offending ids per violated rule, in the order the
            rules were checked. Rules with no offenders are absent.
    """

    code = "VALIDATION_FAILED"

    def __init__(self, violations: dict[ViolationKind, list[int]]) -> None:
        self.violations = violations
        super().__init__("Wrong rulers data. " + "; ".join(self.messages))

    @property
    def messages(self) -> list[str]:
        """One human-readable line per violated rule."""
        return [
            f"{VIOLATION_MESSAGES[kind]} for IDs: {', '.join(str(i) for i in ids)}"
            for kind, ids in self.violations.items()
        ]
