"""Configuration for docprep."""

from docprep.config.exceptions import ConfigError, ConfigLoadError, ConfigValidationError
from docprep.config.settings import CONFIG_FILENAME, DocPrepSettings, find_config_file, load_settings

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "DocPrepSettings",
    "find_config_file",
    "load_settings",
]
