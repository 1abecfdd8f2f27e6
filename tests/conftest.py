"""Shared pytest fixtures and test helpers for reignstat tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from reignstat.domain.rulers import Ruler
from reignstat.domain.years import fixed_year
from reignstat.infrastructure.source import dump_rulers

AS_OF = 2024


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


def make_ruler(
    rid: int,
    name: str,
    house: str,
    years: str,
    country: str | None = None,
) -> Ruler:
    """Build a Ruler pinned to a fixed current year."""
    return Ruler(
        id=rid,
        name=name,
        house=house,
        years=years,
        country=country,
        clock=fixed_year(AS_OF),
    )


def seven_rulers() -> list[Ruler]:
    """Seven valid rulers across five houses."""
    return [
        make_ruler(1, "Richard the Braveheart", "Plantagenet", "1010-1050", "England"),
        make_ruler(2, "Phill the Wise", "Capet", "1050-1060", "Wales"),
        make_ruler(3, "William the Conqueror", "Normandy", "1060-1080", "England"),
        make_ruler(4, "Henry the Strong", "Plantagenet", "1080-1100", "England"),
        make_ruler(5, "Richard the Gallant", "Stuart", "1100-1130", "Scotland"),
        make_ruler(6, "Henry the Great", "Capet", "1130-1150", "Wales"),
        make_ruler(7, "Edward the Mighty", "Tudor", "1150-1175", "England"),
    ]


@pytest.fixture
def rulers() -> list[Ruler]:
    return seven_rulers()


@pytest.fixture
def rulers_file(tmp_path: Path) -> Path:
    """The seven-ruler fixture written as a source JSON file."""
    path = tmp_path / "kings.json"
    path.write_text(dump_rulers(seven_rulers()), encoding="utf-8")
    return path


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory with no config file or config env vars.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes so no reignstat.toml from the host leaks into the test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("REIGNSTAT_CONFIG", str(tmp_path / "missing.toml"))
    for var in ("REIGNSTAT_SOURCE__LOCATION", "REIGNSTAT_PARSE__AS_OF_YEAR"):
        monkeypatch.delenv(var, raising=False)
