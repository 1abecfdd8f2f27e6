"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``REIGNSTAT_*`` prefix
  3. TOML file    — ``reignstat.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`reignstat.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from reignstat.config.discovery import ConfigError, find_config, read_config
from reignstat.config.models import ParseConfig, ReportConfig, SourceConfig
from reignstat.domain.years import Clock, calendar_year, fixed_year


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``reignstat.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = read_config(toml_path)
            except ConfigError as exc:
                import click

                raise click.ClickException(str(exc)) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class ReignSettings(BaseSettings):
    """Unified settings for the reignstat CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "REIGNSTAT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    source: SourceConfig = Field(default_factory=SourceConfig)
    parse: ParseConfig = Field(default_factory=ParseConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> ReignSettings:
        """Construct settings from CLI invocation.

        Discovers ``reignstat.toml`` via walk-up from *cwd* (or uses the
        explicit *config_path*) and merges CLI flags as highest-priority
        overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(cwd)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

    def with_overrides(
        self,
        *,
        location: str | None = None,
        as_of_year: int | None = None,
        questions: list[str] | None = None,
    ) -> ReignSettings:
        """Return a copy with per-command overrides applied."""
        update: dict[str, Any] = {}
        if location is not None:
            update["source"] = self.source.model_copy(update={"location": location})
        if as_of_year is not None:
            update["parse"] = self.parse.model_copy(update={"as_of_year": as_of_year})
        if questions:
            update["report"] = self.report.model_copy(update={"questions": list(questions)})
        return self.model_copy(update=update) if update else self

    @property
    def clock(self) -> Clock:
        """Current-year provider for open reign ranges."""
        if self.parse.as_of_year is not None:
            return fixed_year(self.parse.as_of_year)
        return calendar_year
