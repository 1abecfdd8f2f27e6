"""Ruler data source: fetch raw JSON and decode it into Ruler values.

A location is either an ``http(s)://`` URL, fetched with httpx, or a
path to a local JSON file. The payload is a JSON array of objects::

    [{"id": 1, "nm": "Edward the Elder", "cty": "United Kingdom",
      "hse": "House of Wessex", "yrs": "899-925"}]

Decoding is lenient about content (blank, null or malformed values
pass through for validation to report) but strict about shape. Only
strict JSON is accepted: a trailing comma is a decode error.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import httpx
import structlog
from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from reignstat.domain.errors import ReignError
from reignstat.domain.rulers import Ruler
from reignstat.domain.years import Clock, calendar_year

logger = structlog.get_logger(__name__)

DEFAULT_LOCATION = (
    "https://gist.githubusercontent.com/christianpanton/10d65ccef9f29de3acd49d97ed423736"
    "/raw/b09563bc0c4b318132c7a738e679d4f984ef0048/kings"
)
DEFAULT_TIMEOUT = 10.0


class SourceError(ReignError):
    """The ruler data could not be fetched or decoded."""

    code = "SOURCE_ERROR"

    def __init__(self, location: str, reason: str) -> None:
        self.location = location
        self.reason = reason
        super().__init__(f"Failed to load rulers from {location}: {reason}")


class RulerRecord(BaseModel):
    """One decoded element of the source payload."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: int
    name: str | None = Field(default=None, alias="nm")
    country: str | None = Field(default=None, alias="cty")
    house: str | None = Field(default=None, alias="hse")
    years: str | None = Field(default=None, alias="yrs")

    def to_ruler(self, clock: Clock = calendar_year) -> Ruler:
        return Ruler(
            id=self.id,
            name=self.name,
            country=self.country,
            house=self.house,
            years=self.years,
            clock=clock,
        )


_PAYLOAD_ADAPTER: TypeAdapter[list[RulerRecord] | None] = TypeAdapter(list[RulerRecord] | None)


def is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def fetch_payload(
    location: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> str:
    """Return the raw text at *location* (URL or file path).

    Raises:
        SourceError: On network errors, non-2xx responses, or unreadable files.
    """
    if is_url(location):
        logger.debug("source.fetch", location=location, timeout=timeout)
        try:
            with httpx.Client(timeout=timeout, transport=transport) as client:
                response = client.get(location, follow_redirects=True)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as exc:
            raise SourceError(location, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise SourceError(location, str(exc) or type(exc).__name__) from exc

    path = Path(location)
    logger.debug("source.read", path=str(path))
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SourceError(location, exc.strerror or str(exc)) from exc


def decode_rulers(
    payload: str,
    *,
    clock: Clock = calendar_year,
    location: str = "<payload>",
) -> list[Ruler] | None:
    """Decode a JSON payload into rulers.

    Returns None when the payload is JSON ``null`` so that the absent
    collection is reported by validation rather than hidden here.

    Raises:
        SourceError: The payload is not a JSON array of ruler objects.
    """
    try:
        records = _PAYLOAD_ADAPTER.validate_json(payload)
    except PydanticValidationError as exc:
        raise SourceError(location, f"invalid payload ({exc.error_count()} errors)") from exc
    if records is None:
        logger.info("source.null_payload", location=location)
        return None
    return [record.to_ruler(clock) for record in records]


def load_rulers(
    location: str = DEFAULT_LOCATION,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    clock: Clock = calendar_year,
    transport: httpx.BaseTransport | None = None,
) -> list[Ruler] | None:
    """Fetch and decode the rulers at *location*."""
    payload = fetch_payload(location, timeout=timeout, transport=transport)
    rulers = decode_rulers(payload, clock=clock, location=location)
    logger.info("source.loaded", location=location, count=len(rulers or ()))
    return rulers


def dump_rulers(rulers: Sequence[Ruler]) -> str:
    """Encode rulers back into the source payload format."""
    records = [
        RulerRecord(id=r.id, name=r.name, country=r.country, house=r.house, years=r.years)
        for r in rulers
    ]
    adapter: TypeAdapter[list[RulerRecord]] = TypeAdapter(list[RulerRecord])
    return adapter.dump_json(records, by_alias=True).decode("utf-8")
