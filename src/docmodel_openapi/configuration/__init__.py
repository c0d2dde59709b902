"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, parse_options_section
from .runtime_settings import ExportConfiguration

__all__ = [
    "ExportConfiguration",
    "ConfigurationError",
    "load_configuration",
    "parse_options_section",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
