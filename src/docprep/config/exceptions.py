"""Custom exceptions for configuration handling."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from docprep.exceptions import DocPrepError


class ConfigError(DocPrepError):
    """Base exception for all configuration-related errors."""


class ConfigLoadError(ConfigError):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load or parse config at '{path}': {reason}")


class ConfigValidationError(ConfigError):
    """Raised when configuration values fail validation."""

    def __init__(self, errors: Sequence[dict[str, Any]] | None = None) -> None:
        self.errors = list(errors or [])
        details = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
            for error in self.errors
        )
        message = f"Configuration validation failed with {len(self.errors)} error(s)"
        super().__init__(f"{message}: {details}" if details else f"{message}.")
