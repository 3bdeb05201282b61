"""Configuration package for docsmith."""

from docsmith.config.exceptions import ConfigError, ConfigParseError, ConfigValidationError
from docsmith.config.loader import find_site_config, load_site_config
from docsmith.config.params import BuildParams, build_params
from docsmith.config.settings import PublishSettings, SiteConfig, TemplateSettings

__all__ = [
    "BuildParams",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "PublishSettings",
    "SiteConfig",
    "TemplateSettings",
    "build_params",
    "find_site_config",
    "load_site_config",
]
