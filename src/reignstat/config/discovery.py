"""Locating and reading reignstat.toml.

The file is found by walking up from the working directory (the way git
finds .git/), unless REIGNSTAT_CONFIG or --config names it directly.
Its contents are checked against the section models before they reach
the settings object.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from reignstat.config.models import ReignConfig

CONFIG_FILENAME = "reignstat.toml"
CONFIG_ENV_VAR = "REIGNSTAT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for reignstat.toml.

    Returns the path to the config file, or None if not found.
    Checks REIGNSTAT_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class ConfigError(ValueError):
    """A reignstat.toml file is unreadable or does not match the schema."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid config in {path}: {reason}")


def read_config(path: Path) -> dict[str, Any]:
    """Read *path* and check it against :class:`ReignConfig`.

    Returns the sparse TOML data rather than the validated model so that
    env vars and CLI flags can still override individual keys.

    Raises:
        ConfigError: Malformed TOML, an unknown section, or a bad value.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        data: dict[str, Any] = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(path, str(exc)) from exc
    try:
        ReignConfig.model_validate(data)
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigError(path, errors) from exc
    return data
