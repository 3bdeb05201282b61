"""Configuration loader for ``docsmith.yml``."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from docsmith.config.exceptions import ConfigParseError, ConfigValidationError
from docsmith.config.settings import SiteConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = ("docsmith.yml", "docsmith.yaml")


def find_site_config(project_root: Path) -> Path | None:
    """Return the config file of ``project_root`` if there is one."""
    for name in CONFIG_FILENAMES:
        candidate = project_root / name
        if candidate.is_file():
            return candidate
    return None


def load_site_config(project_root: Path, config_path: Path | None = None) -> SiteConfig:
    """Load and validate the site configuration.

    Args:
        project_root: Directory searched for ``docsmith.yml``
        config_path: Explicit config file, bypassing the search

    Returns:
        Validated SiteConfig; defaults when no file exists

    Raises:
        ConfigParseError: If the file is not valid YAML
        ConfigValidationError: If the data does not match the schema

    """
    path = config_path or find_site_config(project_root)
    if path is None:
        logger.debug("No docsmith.yml in %s, using defaults", project_root)
        return SiteConfig()

    logger.debug("Loading config from %s", path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(path, e) from e

    if not isinstance(data, dict):
        raise ConfigValidationError(path, [{"loc": (), "msg": "top level must be a mapping"}])

    try:
        return SiteConfig(**data)
    except ValidationError as e:
        raise ConfigValidationError(path, e.errors()) from e


__all__ = ["CONFIG_FILENAMES", "find_site_config", "load_site_config"]
