"""Tests for the question/answer wrappers."""

from reignstat.domain.rulers import Ruler
from reignstat.services.questions import (
    QUESTIONS,
    first_name,
    longest_house,
    longest_monarch,
    rulers_count,
)


class TestQuestionAnswers:
    def test_count(self, rulers: list[Ruler]) -> None:
        qa = rulers_count(rulers)
        assert qa.question == "How many monarchs are there in the list?"
        assert qa.answer == "There are 7 monarchs in the list."

    def test_longest_monarch(self, rulers: list[Ruler]) -> None:
        qa = longest_monarch(rulers)
        assert "Richard the Braveheart" in qa.answer
        assert "41 years" in qa.answer

    def test_longest_house(self, rulers: list[Ruler]) -> None:
        qa = longest_house(rulers)
        assert "Plantagenet" in qa.answer
        assert "60 years" in qa.answer

    def test_first_name(self, rulers: list[Ruler]) -> None:
        qa = first_name(rulers)
        assert qa.answer.endswith("Richard.")

    def test_registry_keys_match_answers(self, rulers: list[Ruler]) -> None:
        for key, question in QUESTIONS.items():
            assert question(rulers).key == key
