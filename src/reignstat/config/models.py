"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, reignstat.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from reignstat.infrastructure.source import DEFAULT_LOCATION, DEFAULT_TIMEOUT

QuestionKey = Literal[
    "count",
    "longest_ruling_monarch",
    "longest_ruling_house",
    "most_used_first_name",
]

ALL_QUESTIONS: tuple[QuestionKey, ...] = (
    "count",
    "longest_ruling_monarch",
    "longest_ruling_house",
    "most_used_first_name",
)


class SourceConfig(BaseModel):
    """[source] section."""

    model_config = {"frozen": True}

    location: str = DEFAULT_LOCATION
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)


class ParseConfig(BaseModel):
    """[parse] section.

    ``as_of_year`` pins the year that open ranges (``"1952-"``) end in.
    When unset, the system calendar is used.
    """

    model_config = {"frozen": True}

    as_of_year: int | None = None


class ReportConfig(BaseModel):
    """[report] section."""

    model_config = {"frozen": True}

    questions: list[QuestionKey] = Field(default_factory=lambda: list(ALL_QUESTIONS))


class ReignConfig(BaseModel):
    """Schema of a whole reignstat.toml file.

    Unknown top-level sections are rejected so that a misspelt
    ``[sorce]`` is reported instead of silently ignored.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    source: SourceConfig = Field(default_factory=SourceConfig)
    parse: ParseConfig = Field(default_factory=ParseConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
