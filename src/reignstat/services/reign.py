"""ReignService — load, validate, and answer the ruler questions.

Pipeline: source -> decode -> validate (whole collection, fail fast)
-> answer. The ruler set is loaded once per service and must pass
validation before any statistic runs.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

import structlog

from reignstat.domain.errors import ReignError, ValidationError
from reignstat.domain.validation import validate_rulers
from reignstat.domain.years import is_open_range
from reignstat.infrastructure.source import SourceError, load_rulers
from reignstat.services.questions import QUESTIONS, QuestionAnswer
from reignstat.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    import httpx

    from reignstat.config.settings import ReignSettings
    from reignstat.domain.rulers import Ruler

logger = structlog.get_logger(__name__)


def error_result(op: str, exc: ReignError) -> ServiceResult:
    """Convert a domain or source error into a failed ServiceResult."""
    detail: dict[str, Any] = {}
    if isinstance(exc, ValidationError):
        detail["violations"] = {str(kind): ids for kind, ids in exc.violations.items()}
        detail["messages"] = exc.messages
    elif isinstance(exc, SourceError):
        detail["location"] = exc.location
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=str(exc), detail=detail),
    )


class ReignService:
    """Answers the ruler questions for one configured source.

    Usage::

        svc = ReignService(settings)
        result = svc.report()
    """

    def __init__(
        self,
        settings: ReignSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._rulers: list[Ruler] | None = None
        self._loaded = False

    @property
    def location(self) -> str:
        return self._settings.source.location

    def load(self) -> list[Ruler] | None:
        """Fetch and decode rulers once; later calls reuse the result."""
        if not self._loaded:
            self._rulers = load_rulers(
                self.location,
                timeout=self._settings.source.timeout,
                clock=self._settings.clock,
                transport=self._transport,
            )
            self._loaded = True
        return self._rulers

    def _load_validated(self) -> list[Ruler]:
        rulers = self.load()
        validate_rulers(rulers)
        assert rulers is not None
        return rulers

    def _meta(self) -> dict[str, Any]:
        return {"source": self.location, "as_of_year": self._settings.clock()}

    def _warnings(self, rulers: Sequence[Ruler]) -> list[str]:
        # Open reigns only depend on the wall clock when no year is pinned.
        if self._settings.parse.as_of_year is not None:
            return []
        open_ids = [r.id for r in rulers if is_open_range(r.years)]
        if not open_ids:
            return []
        return [
            f"{len(open_ids)} open reign(s) resolved against the current year "
            f"{self._settings.clock()}; pass --as-of to pin it"
        ]

    def check(self) -> ServiceResult:
        """Load and validate the ruler set without computing statistics."""
        try:
            rulers = self._load_validated()
        except ReignError as exc:
            logger.info("check.failed", code=exc.code, source=self.location)
            return error_result("check", exc)

        logger.info("check.passed", count=len(rulers), source=self.location)
        return ServiceResult(
            ok=True,
            op="check",
            data={"count": len(rulers), "source": self.location},
            warnings=self._warnings(rulers),
            meta=self._meta(),
        )

    def report(self, questions: Iterable[str] | None = None) -> ServiceResult:
        """Validate, then answer *questions* (default: configured set)."""
        keys = list(questions) if questions else list(self._settings.report.questions)
        try:
            rulers = self._load_validated()
            answers = answer_questions(rulers, keys)
        except ReignError as exc:
            logger.info("report.failed", code=exc.code, source=self.location)
            return error_result("report", exc)

        return ServiceResult(
            ok=True,
            op="report",
            data={
                "answers": [qa.model_dump() for qa in answers],
                "count": len(answers),
            },
            warnings=self._warnings(rulers),
            meta=self._meta(),
        )


def answer_questions(rulers: Sequence[Ruler], keys: Iterable[str]) -> list[QuestionAnswer]:
    """Answer each question in *keys* over an already-validated set.

    Raises:
        KeyError: A key does not name a known question.
        EmptyCollectionError: *rulers* is empty and a query needs a winner.
    """
    answers: list[QuestionAnswer] = []
    for key in keys:
        qa = QUESTIONS[key](rulers)
        logger.debug("question.answered", key=key, value=qa.value)
        answers.append(qa)
    return answers
