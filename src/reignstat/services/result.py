"""Envelope returned by ReignService for every check and report.

A failed load, a validation failure or an empty collection comes back as
``ok=False`` with a :class:`ServiceError` whose ``code`` is one of
``SOURCE_ERROR``, ``VALIDATION_FAILED``, ``EMPTY_INPUT`` or
``EMPTY_COLLECTION``. The CLI renders the envelope and picks the exit
code from ``ok``; ReignError subclasses do not escape the service.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why a check or report failed.

    ``detail`` holds the violation map and messages for validation
    failures, or the offending ``location`` for source errors.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of ``check`` or ``report`` over one ruler source.

    Attributes:
        ok: True when the rulers loaded, validated and were answered.
        op: ``"check"`` or ``"report"``.
        data: Ruler count for check; the question answers for report.
        warnings: Notes that did not stop the run, such as open reigns
            measured against the wall clock.
        error: Set exactly when ``ok`` is False.
        meta: Source location and the year open reigns end in.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
