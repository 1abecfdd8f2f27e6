"""Tests for the format_result dispatcher and OutputSettings."""

import json

from reignstat.output.formatters import OutputSettings, format_result
from reignstat.services.result import ServiceError, ServiceResult

ANSWERS = [
    {
        "key": "count",
        "question": "How many monarchs are there in the list?",
        "answer": "There are 7 monarchs in the list.",
        "value": 7,
    },
    {
        "key": "most_used_first_name",
        "question": "What was the most common first name?",
        "answer": "The most common first name on the list was Richard.",
        "value": "Richard",
    },
]


def _report() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="report",
        data={"answers": ANSWERS, "count": 2},
        meta={"source": "kings.json", "as_of_year": 2024},
    )


def _validation_error() -> ServiceResult:
    return ServiceResult(
        ok=False,
        op="check",
        error=ServiceError(
            code="VALIDATION_FAILED",
            message="Wrong rulers data.",
            detail={
                "violations": {"invalid_id": [0], "duplicate_id": [2]},
                "messages": ["Invalid IDs for IDs: 0", "Duplicated IDs for IDs: 2"],
            },
        ),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_report(), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "report"
        assert data["data"]["answers"][0]["value"] == 7

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_report(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "report"


class TestFormatResultQuiet:
    def test_answers_only(self) -> None:
        output = format_result(_report(), settings=OutputSettings(quiet=True))
        assert output.splitlines() == [
            "There are 7 monarchs in the list.",
            "The most common first name on the list was Richard.",
        ]

    def test_non_report(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"count": 7})
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: check"

    def test_error(self) -> None:
        output = format_result(_validation_error(), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: check")


class TestFormatResultHuman:
    def test_report_lists_questions_and_answers(self) -> None:
        output = format_result(_report())
        assert "How many monarchs are there in the list?" in output
        assert "There are 7 monarchs in the list." in output
        assert "Richard." in output
        assert "as_of_year" not in output

    def test_report_verbose_shows_meta(self) -> None:
        output = format_result(_report(), settings=OutputSettings(verbose=True))
        assert "as_of_year: 2024" in output

    def test_check_ok(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"count": 7, "source": "kings.json"})
        assert "7 rulers passed validation" in format_result(result)

    def test_validation_error_lists_every_rule(self) -> None:
        output = format_result(_validation_error())
        assert "ERROR" in output
        assert "2 rule(s) violated" in output
        assert "Invalid IDs for IDs: 0" in output
        assert "Duplicated IDs for IDs: 2" in output

    def test_plain_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="report",
            error=ServiceError(code="EMPTY_COLLECTION", message="Cannot compute it."),
        )
        assert "Cannot compute it." in format_result(result)

    def test_generic_op(self) -> None:
        result = ServiceResult(ok=True, op="other", data={"key": "value"})
        output = format_result(result)
        assert "OK" in output
        assert "key: value" in output
