"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from reignstat.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"count": 7})
        assert result.ok is True
        assert result.op == "check"
        assert result.data == {"count": 7}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="EMPTY_INPUT", message="Rulers collection is absent.")
        result = ServiceResult(ok=False, op="check", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "EMPTY_INPUT"

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="report", data={"count": 4}, meta={"as_of_year": 2024})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["count"] == 4
        assert parsed["meta"]["as_of_year"] == 2024

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="check")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(
            code="VALIDATION_FAILED",
            message="Wrong rulers data.",
            detail={"violations": {"invalid_id": [0]}},
        )
        assert error.detail["violations"]["invalid_id"] == [0]

    def test_default_detail(self) -> None:
        assert ServiceError(code="E", message="bad").detail == {}
