"""Custom exceptions for configuration handling."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from docsmith.exceptions import DocsmithError


class ConfigError(DocsmithError):
    """Base exception for all configuration-related errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid YAML."""

    def __init__(self, path: Path, original_exception: Exception) -> None:
        self.path = path
        super().__init__(f"Failed to parse {path}: {original_exception}")
        self.__cause__ = original_exception


class ConfigValidationError(ConfigError):
    """Raised when the configuration file fails validation."""

    def __init__(self, path: Path, errors: Sequence[dict[str, Any]] | None = None) -> None:
        self.path = path
        self.errors = list(errors or [])
        details = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}" for err in self.errors
        )
        super().__init__(f"Configuration {path} failed validation with {len(self.errors)} error(s): {details}")
