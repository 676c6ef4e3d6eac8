"""Settings for the doc preparer.

Configuration priority (highest to lowest):

1. CLI flags (passed to :func:`load_settings` as overrides)
2. Environment variables (``DOCPREP_SOURCE_DIR``, ``DOCPREP_TARGET_DIR``,
   ``DOCPREP_COMMIT_SHA`` / ``GITHUB_SHA``)
3. ``.docprep.toml`` found in or above the working directory
4. Defaults, which mirror a ``website/`` folder sitting next to ``docs/``
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Final

from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from docprep.config.exceptions import ConfigLoadError, ConfigValidationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME: Final[str] = ".docprep.toml"
ENV_PREFIX: Final[str] = "DOCPREP_"
SHORT_COMMIT_LENGTH: Final[int] = 7

_COMMIT_ENV_VARS: Final[tuple[str, ...]] = ("DOCPREP_COMMIT_SHA", "GITHUB_SHA")
_PATH_FIELDS: Final[tuple[str, ...]] = ("source_dir", "target_dir")


class DocPrepSettings(BaseSettings):
    """Resolved settings for a preparer run."""

    source_dir: Path = Field(
        default=Path("../docs"),
        description="Directory holding the architecture markdown files",
    )
    target_dir: Path = Field(
        default=Path("docs"),
        description="Docs folder consumed by the site generator (wiped on every run)",
    )
    commit_sha: str | None = Field(
        default=None,
        validation_alias=AliasChoices(*_COMMIT_ENV_VARS),
        description="Commit identifier shown in logs; not used by the transform",
    )

    model_config = SettingsConfigDict(
        extra="forbid",
        validate_assignment=True,
        env_prefix=ENV_PREFIX,
        populate_by_name=True,
    )

    @property
    def short_commit(self) -> str | None:
        if not self.commit_sha:
            return None
        return self.commit_sha[:SHORT_COMMIT_LENGTH]


def find_config_file(start_dir: Path) -> Path | None:
    """Search upward from ``start_dir`` for ``.docprep.toml``."""
    current = start_dir.expanduser().resolve()
    for candidate in (current, *current.parents):
        config_path = candidate / CONFIG_FILENAME
        if config_path.is_file():
            return config_path
    return None


def _env_override_keys() -> set[str]:
    """Return the settings fields that are set through environment variables.

    Names are compared case-insensitively, as pydantic-settings does.
    """
    env_names = {name.upper() for name, value in os.environ.items() if value}
    keys = {name for name in _PATH_FIELDS if f"{ENV_PREFIX}{name.upper()}" in env_names}
    if any(var in env_names for var in _COMMIT_ENV_VARS):
        keys.add("commit_sha")
    return keys


def _read_config_file(config_path: Path) -> dict[str, Any]:
    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigLoadError(config_path, str(exc)) from exc

    # Relative paths in the file are relative to the file, not to the CWD.
    for key in _PATH_FIELDS:
        if key in data and isinstance(data[key], str):
            path = Path(data[key]).expanduser()
            data[key] = path if path.is_absolute() else config_path.parent / path
    return data


def load_settings(start_dir: Path | None = None, **overrides: Any) -> DocPrepSettings:
    """Load settings from defaults, ``.docprep.toml``, the environment and ``overrides``.

    Overrides whose value is ``None`` are ignored so CLI options can be passed
    through unconditionally.

    Raises:
        ConfigLoadError: If the config file exists but cannot be parsed.
        ConfigValidationError: If any value is invalid.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    try:
        base = DocPrepSettings()
    except ValidationError as exc:
        raise ConfigValidationError(exc.errors()) from exc

    merged = base.model_dump()
    config_path = find_config_file(start_dir)
    if config_path is not None:
        logger.debug("Loading config from %s", config_path)
        env_keys = _env_override_keys()
        for key, value in _read_config_file(config_path).items():
            if key not in env_keys:
                merged[key] = value

    merged.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return DocPrepSettings.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(exc.errors()) from exc


__all__ = ["CONFIG_FILENAME", "DocPrepSettings", "find_config_file", "load_settings"]
