"""The four fixed questions and their human-readable answers.

Each function runs one statistic and wraps the computed value in a
:class:`QuestionAnswer`. Wording is presentation; the embedded values
are the contract.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from pydantic import BaseModel

from reignstat.domain.rulers import Ruler
from reignstat.domain.statistics import (
    count_rulers,
    longest_ruling_house,
    longest_ruling_monarch,
    most_used_first_name,
)


class QuestionAnswer(BaseModel):
    """A predefined question paired with its computed answer."""

    model_config = {"frozen": True}

    key: str
    question: str
    answer: str
    value: Any = None


def rulers_count(rulers: Sequence[Ruler]) -> QuestionAnswer:
    count = count_rulers(rulers)
    return QuestionAnswer(
        key="count",
        question="How many monarchs are there in the list?",
        answer=f"There are {count} monarchs in the list.",
        value=count,
    )


def longest_monarch(rulers: Sequence[Ruler]) -> QuestionAnswer:
    ruler = longest_ruling_monarch(rulers)
    return QuestionAnswer(
        key="longest_ruling_monarch",
        question="Which monarch ruled the longest (and for how long)?",
        answer=(
            f"The monarch who ruled the longest was {ruler.name}, "
            f"who ruled {ruler.duration} years."
        ),
        value={"id": ruler.id, "name": ruler.name, "duration": ruler.duration},
    )


def longest_house(rulers: Sequence[Ruler]) -> QuestionAnswer:
    best = longest_ruling_house(rulers)
    return QuestionAnswer(
        key="longest_ruling_house",
        question="Which house ruled the longest (and for how long)?",
        answer=(
            f"The house that ruled the longest was {best.house}, "
            f"which ruled {best.score} years."
        ),
        value={"house": best.house, "score": best.score},
    )


def first_name(rulers: Sequence[Ruler]) -> QuestionAnswer:
    name = most_used_first_name(rulers)
    return QuestionAnswer(
        key="most_used_first_name",
        question="What was the most common first name?",
        answer=f"The most common first name on the list was {name}.",
        value=name,
    )


QUESTIONS: dict[str, Callable[[Sequence[Ruler]], QuestionAnswer]] = {
    "count": rulers_count,
    "longest_ruling_monarch": longest_monarch,
    "longest_ruling_house": longest_house,
    "most_used_first_name": first_name,
}
